"""Load contract ABI and documentation from solc compiler output."""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eth_typing.abi import ABI

logger = logging.getLogger(__name__)


class ArtifactLoadError(Exception):
    """Error loading compiler output."""

    def __init__(self, message: str, phase: str = "reading"):
        super().__init__(message)
        self.phase = phase  # "reading", "parsing", "lookup"


@dataclass
class ContractSources:
    """The four documents merged for one compiled contract."""

    source: str
    name: str
    abi: ABI
    devdoc: dict[str, Any] = field(default_factory=dict)
    userdoc: dict[str, Any] = field(default_factory=dict)
    evm: dict[str, Any] = field(default_factory=dict)

    @property
    def qualified_name(self) -> str:
        return f"{self.source}:{self.name}"


def load_compiler_output(path: Path) -> dict[str, Any]:
    """Read a solc standard-JSON output or a Hardhat build-info file.

    Args:
        path: Path to the JSON file

    Returns:
        The solc output object (the one holding ``contracts``)

    Raises:
        ArtifactLoadError: If the file cannot be read or has no contracts
    """
    logger.info(f"Loading compiler output from {path}")
    try:
        content = path.read_text()
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise ArtifactLoadError(str(e), phase="reading") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise ArtifactLoadError(f"Invalid JSON in {path}: {e}", phase="parsing") from e

    # Hardhat build-info wraps the solc output
    if isinstance(data, dict) and isinstance(data.get("output"), dict):
        data = data["output"]

    if not isinstance(data, dict) or not isinstance(data.get("contracts"), dict):
        raise ArtifactLoadError(f"No contracts found in {path}", phase="parsing")
    return data


def iter_contract_sources(output: dict[str, Any]) -> Iterator[ContractSources]:
    """Yield the documents of every contract in a solc output."""
    for source, contracts in output.get("contracts", {}).items():
        for name, compiled in contracts.items():
            yield ContractSources(
                source=source,
                name=name,
                abi=compiled.get("abi") or [],
                devdoc=compiled.get("devdoc") or {},
                userdoc=compiled.get("userdoc") or {},
                evm=compiled.get("evm") or {},
            )


def find_contract(output: dict[str, Any], name: str) -> ContractSources:
    """Select one contract by ``Name`` or ``path/to/File.sol:Name``.

    Raises:
        ArtifactLoadError: If no contract, or more than one, matches
    """
    matches = [
        c
        for c in iter_contract_sources(output)
        if name in (c.name, c.qualified_name)
    ]
    if not matches:
        raise ArtifactLoadError(f"Contract not found: {name}", phase="lookup")
    if len(matches) > 1:
        candidates = ", ".join(c.qualified_name for c in matches)
        raise ArtifactLoadError(
            f"Contract name {name} is ambiguous: {candidates}", phase="lookup"
        )
    return matches[0]
