"""Assemble per-entry descriptions from devdoc and userdoc fragments."""

import logging
from typing import Any

from eth_typing.abi import ABIElement

from natspec_docgen.models import BaseDescription, MethodInfo, Param, Return
from natspec_docgen.signature import EVENT_TYPE, FUNCTION_TYPE, full_signature

logger = logging.getLogger(__name__)

Fragment = dict[str, Any] | None


def build_base_description(name: str, devdoc: Fragment, userdoc: Fragment) -> BaseDescription:
    """Build the name, notice and details shared by contracts and entries.

    Args:
        name: Contract or entry name
        devdoc: Developer documentation fragment, if any
        userdoc: User documentation fragment, if any

    Returns:
        BaseDescription with notice and details set only when documented
    """
    description = BaseDescription(name=name)
    if userdoc and userdoc.get("notice"):
        description.notice = userdoc["notice"]
    if devdoc and devdoc.get("details"):
        description.details = devdoc["details"]
    return description


def build_params(devdoc: Fragment, entry: ABIElement) -> list[Param] | None:
    """Pair documented parameter descriptions with the entry's inputs.

    Returns None when the fragment has no params mapping. Inputs without a
    description are skipped.
    """
    if not devdoc or devdoc.get("params") is None:
        return None

    descriptions = devdoc["params"]
    params = []
    for component in entry.get("inputs") or []:
        description = descriptions.get(component["name"])
        if not description:
            continue
        param = Param(name=component["name"], type=component["type"], description=description)
        if entry["type"] == EVENT_TYPE:
            param.indexed = bool(component.get("indexed", False))
        params.append(param)
    return params


def build_returns(devdoc: Fragment, entry: ABIElement) -> list[Return] | None:
    """Pair documented return descriptions with the entry's outputs.

    Unnamed outputs are looked up as ``_0``, ``_1``, ... by position.
    """
    if not devdoc or devdoc.get("returns") is None:
        return None

    descriptions = devdoc["returns"]
    returns = []
    for index, component in enumerate(entry.get("outputs") or []):
        name = component.get("name") or f"_{index}"
        description = descriptions.get(name)
        if not description:
            continue
        returns.append(Return(name=name, type=component["type"], description=description))
    return returns


def build_method_info(
    entry: ABIElement,
    devdoc: Fragment,
    userdoc: Fragment,
    selector: str | None = None,
) -> MethodInfo:
    """Combine an ABI entry with its documentation fragments.

    Args:
        entry: ABI entry of type function, event or error
        devdoc: Matching developer documentation fragment, if any
        userdoc: Matching user documentation fragment, if any
        selector: 4-byte selector, for functions

    Returns:
        MethodInfo for the entry
    """
    base = build_base_description(entry["name"], devdoc, userdoc)
    info = MethodInfo(
        name=base.name,
        abi=entry,
        full_signature=full_signature(entry),
        notice=base.notice,
        details=base.details,
        params=build_params(devdoc, entry),
    )
    if entry["type"] == FUNCTION_TYPE:
        info.selector = selector
        info.returns = build_returns(devdoc, entry)
    return info
