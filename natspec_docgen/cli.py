"""Command-line interface for natspec-docgen."""

import argparse
import json
import logging
import sys
from pathlib import Path

from natspec_docgen.artifacts import (
    ArtifactLoadError,
    find_contract,
    iter_contract_sources,
    load_compiler_output,
)
from natspec_docgen.assembler import parse_contract_info
from natspec_docgen.errors import MergeError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="natspec-docgen",
        description="Merge contract ABI, devdoc and userdoc into one description",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge documentation for contracts in a compiler output file",
    )
    merge_parser.add_argument(
        "path",
        type=Path,
        help="solc standard-JSON output or Hardhat build-info file",
    )
    merge_parser.add_argument(
        "--contract",
        "-c",
        action="append",
        default=[],
        help="Contract to merge, as Name or path/File.sol:Name (repeatable; default: all)",
    )
    merge_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )
    merge_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    return parser


def run_merge(
    path: Path, contracts: list[str], output: Path | None, indent: int
) -> int:
    """Run the merge command.

    Args:
        path: Compiler output to read
        contracts: Contract names to merge; all contracts when empty
        output: Optional file to write the JSON to
        indent: JSON indentation

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        compiler_output = load_compiler_output(path)
        if contracts:
            selected = [find_contract(compiler_output, name) for name in contracts]
        else:
            selected = list(iter_contract_sources(compiler_output))

        merged = {}
        for sources in selected:
            info = parse_contract_info(
                sources.name, sources.devdoc, sources.userdoc, sources.abi, sources.evm
            )
            merged[sources.qualified_name] = info.to_dict()
    except (ArtifactLoadError, MergeError) as e:
        logger.error(f"Merge failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    content = json.dumps(merged, indent=indent)
    if output is None:
        print(content)
    else:
        output.write_text(content + "\n")
        logger.info(f"Merged documentation written to {output}")
        print(f"Merged {len(merged)} contracts. Written to: {output}", file=sys.stderr)
    return 0


def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for fatal errors)
    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    setup_logging(parsed.verbose)

    if parsed.command is None:
        parser.print_help(sys.stderr)
        return 1

    if parsed.command == "merge":
        return run_merge(parsed.path, parsed.contract, parsed.output, parsed.indent)

    return 1


def main():
    """Entry point for the CLI."""
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
