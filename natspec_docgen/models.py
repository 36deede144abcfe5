"""Data models for merged contract documentation."""

import json
from dataclasses import asdict, dataclass, field
from typing import Any

from eth_typing.abi import ABIElement


def _without_none(values: dict) -> dict:
    """Drop keys whose value is None."""
    return {k: v for k, v in values.items() if v is not None}


@dataclass
class FullSignature:
    """Display-oriented signature of a function, event or error."""

    method_type: str  # "function", "event", "error"
    method_name: str
    parameters: list[str] | None = None
    modifiers: list[str] | None = None  # functions only
    returns: list[str] | None = None  # functions with outputs only

    def to_display(self) -> str:
        """Render as a one-line Solidity-style declaration.

        e.g. ``function transfer(address to, uint256 amount) external returns (bool)``
        """
        text = f"{self.method_type} {self.method_name}({', '.join(self.parameters or [])})"
        if self.modifiers:
            text += " " + " ".join(self.modifiers)
        if self.returns:
            text += f" ({', '.join(self.returns)})"
        return text

    def to_dict(self) -> dict:
        return _without_none(asdict(self))


@dataclass
class Param:
    """A documented input of a function, event or error."""

    name: str
    type: str
    description: str
    indexed: bool | None = None  # events only


@dataclass
class Return:
    """A documented output of a function."""

    name: str
    type: str
    description: str


@dataclass
class BaseDescription:
    """Name plus the notice and details text shared by every record."""

    name: str
    notice: str | None = None
    details: str | None = None


@dataclass
class MethodInfo:
    """Merged documentation for one function, event or error.

    The kind of entry is carried by ``full_signature.method_type``;
    ``returns`` and ``selector`` are only ever set for functions.
    """

    name: str
    abi: ABIElement
    full_signature: FullSignature
    notice: str | None = None
    details: str | None = None
    params: list[Param] | None = None
    returns: list[Return] | None = None
    selector: str | None = None

    @property
    def kind(self) -> str:
        return self.full_signature.method_type

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding unset optional fields."""
        result: dict[str, Any] = {
            "name": self.name,
            "notice": self.notice,
            "details": self.details,
            "selector": self.selector,
            "abi": self.abi,
            "full_signature": self.full_signature.to_dict(),
        }
        if self.params is not None:
            result["params"] = [_without_none(asdict(p)) for p in self.params]
        if self.returns is not None:
            result["returns"] = [asdict(r) for r in self.returns]
        return _without_none(result)


@dataclass
class ContractInfo(BaseDescription):
    """Complete merged description of a contract.

    ``functions``, ``events`` and ``errors`` are keyed by canonical signature
    and keep ABI declaration order.
    """

    author: str | None = None
    title: str | None = None
    functions: dict[str, MethodInfo] = field(default_factory=dict)
    events: dict[str, MethodInfo] = field(default_factory=dict)
    errors: dict[str, MethodInfo] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = _without_none(
            {
                "name": self.name,
                "notice": self.notice,
                "details": self.details,
                "author": self.author,
                "title": self.title,
            }
        )
        # Category mappings are always present, even when empty
        result["functions"] = {s: m.to_dict() for s, m in self.functions.items()}
        result["events"] = {s: m.to_dict() for s, m in self.events.items()}
        result["errors"] = {s: m.to_dict() for s, m in self.errors.items()}
        return result

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
