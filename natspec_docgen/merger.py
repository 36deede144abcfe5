"""Cross-reference ABI entries with documentation and compiled selectors."""

import logging
from typing import Any

from eth_typing.abi import ABI, ABIElement

from natspec_docgen.describer import Fragment, build_method_info
from natspec_docgen.errors import SelectorNotFoundError
from natspec_docgen.models import MethodInfo
from natspec_docgen.signature import (
    ERROR_TYPE,
    EVENT_TYPE,
    FUNCTION_TYPE,
    canonical_signature,
)

logger = logging.getLogger(__name__)

# Documentation bucket holding each category's fragments, in lookup order
BUCKETS = {
    FUNCTION_TYPE: ("methods",),
    EVENT_TYPE: ("events", "methods"),
    ERROR_TYPE: ("errors",),
}


def entries_of_kind(abi: ABI, kind: str) -> list[ABIElement]:
    """Return the ABI entries of one type, in declaration order."""
    return [entry for entry in abi if entry.get("type") == kind]


def find_fragment(doc: dict[str, Any] | None, kind: str, signature: str) -> Fragment:
    """Look up the documentation fragment for a signature.

    Missing documents, buckets and keys all mean "no fragment". Error buckets
    map each signature to a list of fragments; the first one is used.
    """
    if not doc:
        return None

    for bucket_name in BUCKETS[kind]:
        bucket = doc.get(bucket_name)
        if not bucket or signature not in bucket:
            continue
        fragment = bucket[signature]
        if kind == ERROR_TYPE:
            return fragment[0] if fragment else None
        return fragment
    return None


def merge_category(
    kind: str,
    abi: ABI,
    devdoc: dict[str, Any] | None,
    userdoc: dict[str, Any] | None,
    method_identifiers: dict[str, str] | None = None,
) -> dict[str, MethodInfo]:
    """Merge all ABI entries of one category with their documentation.

    Args:
        kind: "function", "event" or "error"
        abi: The contract ABI
        devdoc: Developer documentation document
        userdoc: User documentation document
        method_identifiers: Canonical signature to selector map, for functions

    Returns:
        Mapping of canonical signature to MethodInfo, in ABI order

    Raises:
        SelectorNotFoundError: If a function has no compiled selector
    """
    merged: dict[str, MethodInfo] = {}

    for entry in entries_of_kind(abi, kind):
        signature = canonical_signature(entry)

        selector = None
        if kind == FUNCTION_TYPE:
            selector = (method_identifiers or {}).get(signature)
            if not selector:
                logger.error(f"No selector found for {signature}")
                raise SelectorNotFoundError(signature)

        merged[signature] = build_method_info(
            entry,
            find_fragment(devdoc, kind, signature),
            find_fragment(userdoc, kind, signature),
            selector=selector,
        )
        logger.debug(f"Merged {kind} {signature}")

    logger.info(f"Merged {len(merged)} {kind} entries")
    return merged


def merge_functions(
    abi: ABI,
    devdoc: dict[str, Any] | None,
    userdoc: dict[str, Any] | None,
    method_identifiers: dict[str, str] | None,
) -> dict[str, MethodInfo]:
    return merge_category(FUNCTION_TYPE, abi, devdoc, userdoc, method_identifiers)


def merge_events(
    abi: ABI, devdoc: dict[str, Any] | None, userdoc: dict[str, Any] | None
) -> dict[str, MethodInfo]:
    return merge_category(EVENT_TYPE, abi, devdoc, userdoc)


def merge_errors(
    abi: ABI, devdoc: dict[str, Any] | None, userdoc: dict[str, Any] | None
) -> dict[str, MethodInfo]:
    return merge_category(ERROR_TYPE, abi, devdoc, userdoc)
