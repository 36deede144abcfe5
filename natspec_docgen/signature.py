"""Build canonical and display signatures from ABI entries."""

import logging

from eth_typing.abi import ABIComponent, ABIElement

from natspec_docgen.errors import UnknownStateMutabilityError
from natspec_docgen.models import FullSignature

logger = logging.getLogger(__name__)

FUNCTION_TYPE = "function"
EVENT_TYPE = "event"
ERROR_TYPE = "error"

# Solidity modifiers rendered for each ABI state mutability
MODIFIERS = {
    "payable": ["external", "payable"],
    "nonpayable": ["external"],
    "view": ["external", "view"],
    "pure": ["external", "pure"],
}


def component_type(component: ABIComponent) -> str:
    """Return the canonical type string of one input.

    Tuple inputs are expanded recursively into ``(inner1,inner2,...)``, with a
    ``[]`` suffix when the declared type is ``tuple[]``.
    """
    components = component.get("components")
    if components is None:
        return component["type"]

    suffix = "[]" if component["type"] == "tuple[]" else ""
    return f"({','.join(component_type(c) for c in components)}){suffix}"


def canonical_signature(entry: ABIElement) -> str:
    """Compute the ``name(type1,type2,...)`` key of a function, event or error.

    This matches the keys solc uses in devdoc/userdoc method maps and in
    ``evm.methodIdentifiers``.

    Args:
        entry: ABI entry of type function, event or error

    Returns:
        Canonical signature string, without spaces
    """
    inputs = entry.get("inputs") or []
    return f"{entry['name']}({','.join(component_type(i) for i in inputs)})"


def function_modifiers(state_mutability: str | None, name: str | None = None) -> list[str]:
    """Map a state mutability to its rendered modifier tokens.

    Raises:
        UnknownStateMutabilityError: If the value is not one of
            payable, nonpayable, view or pure
    """
    if state_mutability not in MODIFIERS:
        logger.error(f"Unknown state mutability {state_mutability!r} for {name}")
        raise UnknownStateMutabilityError(state_mutability, name)
    return list(MODIFIERS[state_mutability])


def _render_input(component: ABIComponent, method_type: str) -> str:
    indexed = " indexed" if method_type == EVENT_TYPE and component.get("indexed") else ""
    return f"{component['type']}{indexed} {component['name']}"


def _render_output(component: ABIComponent) -> str:
    name = component.get("name")
    return f"{component['type']} {name}" if name else component["type"]


def full_signature(entry: ABIElement) -> FullSignature:
    """Build the human-readable signature of an ABI entry.

    Args:
        entry: ABI entry of type function, event or error

    Returns:
        FullSignature with rendered parameters, and for functions the
        modifiers and return types

    Raises:
        UnknownStateMutabilityError: If a function has an unrecognized
            stateMutability
    """
    method_type = entry["type"]
    signature = FullSignature(method_type=method_type, method_name=entry["name"])

    params = [_render_input(i, method_type) for i in entry.get("inputs") or []]
    if params:
        signature.parameters = params

    if method_type == FUNCTION_TYPE:
        modifiers = function_modifiers(entry.get("stateMutability"), entry["name"])
        returns = [_render_output(o) for o in entry.get("outputs") or []]
        if returns:
            modifiers.append("returns")
            signature.returns = returns
        signature.modifiers = modifiers

    logger.debug(f"Built full signature: {signature.to_display()}")
    return signature
