"""Top-level assembly of a contract's merged documentation."""

import logging
from typing import Any

from eth_typing.abi import ABI

from natspec_docgen.describer import build_base_description
from natspec_docgen.merger import merge_errors, merge_events, merge_functions
from natspec_docgen.models import ContractInfo

logger = logging.getLogger(__name__)


def parse_contract_info(
    name: str,
    devdoc: dict[str, Any] | None,
    userdoc: dict[str, Any] | None,
    abi: ABI,
    evm: dict[str, Any] | None,
) -> ContractInfo:
    """Merge a contract's ABI, devdoc, userdoc and compiled metadata.

    Args:
        name: Contract name
        devdoc: solc developer documentation output
        userdoc: solc user documentation output
        abi: Contract ABI
        evm: solc ``evm`` output carrying ``methodIdentifiers``

    Returns:
        ContractInfo with functions, events and errors always attached

    Raises:
        SelectorNotFoundError: If a function is missing from methodIdentifiers
        UnknownStateMutabilityError: If a function has an unsupported
            stateMutability
    """
    logger.info(f"Parsing contract info for {name}")
    devdoc = devdoc or {}
    userdoc = userdoc or {}
    method_identifiers = (evm or {}).get("methodIdentifiers") or {}

    base = build_base_description(name, devdoc, userdoc)
    contract = ContractInfo(name=base.name, notice=base.notice, details=base.details)

    if devdoc.get("author"):
        contract.author = devdoc["author"]
    if devdoc.get("title"):
        contract.title = devdoc["title"]

    contract.events = merge_events(abi, devdoc, userdoc)
    contract.functions = merge_functions(abi, devdoc, userdoc, method_identifiers)
    contract.errors = merge_errors(abi, devdoc, userdoc)

    logger.info(
        f"Parsed {name}: {len(contract.functions)} functions, "
        f"{len(contract.events)} events, {len(contract.errors)} errors"
    )
    return contract
