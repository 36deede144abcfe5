"""Errors raised while merging contract interface documents."""


class MergeError(Exception):
    """An unrecoverable failure while merging a contract's documents."""


class SelectorNotFoundError(MergeError):
    """A function's canonical signature has no compiled selector."""

    def __init__(self, signature: str):
        super().__init__(f"Failed to parse selector for {signature} function")
        self.signature = signature


class UnknownStateMutabilityError(MergeError):
    """A function declares a state mutability we cannot render."""

    def __init__(self, state_mutability: str | None, name: str | None = None):
        message = f"Failed to get function modifiers from {state_mutability}"
        if name:
            message += f" (function {name})"
        super().__init__(message)
        self.state_mutability = state_mutability
        self.name = name
