"""Merge Solidity ABI, devdoc and userdoc into unified contract documentation."""

from natspec_docgen.assembler import parse_contract_info
from natspec_docgen.errors import (
    MergeError,
    SelectorNotFoundError,
    UnknownStateMutabilityError,
)
from natspec_docgen.models import (
    BaseDescription,
    ContractInfo,
    FullSignature,
    MethodInfo,
    Param,
    Return,
)
from natspec_docgen.signature import canonical_signature, full_signature

__all__ = [
    # Models
    "BaseDescription",
    "ContractInfo",
    "FullSignature",
    "MethodInfo",
    "Param",
    "Return",
    # Errors
    "MergeError",
    "SelectorNotFoundError",
    "UnknownStateMutabilityError",
    # Merging
    "canonical_signature",
    "full_signature",
    "parse_contract_info",
]
