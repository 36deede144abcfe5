"""Tests for CLI interface."""

import json
from pathlib import Path

import pytest

from natspec_docgen.cli import run_cli


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures"


class TestCLI:
    def given_args(self, *args):
        self.args = [str(a) for a in args]

    def when_cli_is_run(self, capsys):
        self.exit_code = run_cli(self.args)
        self.captured = capsys.readouterr()

    def then_exit_code_is_zero(self):
        assert self.exit_code == 0

    def then_exit_code_is_nonzero(self):
        assert self.exit_code != 0

    def then_stdout_is_json(self):
        self.output = json.loads(self.captured.out)

    def then_stderr_contains(self, text):
        assert text in self.captured.err

    def test_merges_all_contracts(self, fixtures_path, capsys):
        """merge prints every contract keyed by path:Name."""
        self.given_args("merge", fixtures_path / "token_output.json")
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is_json()
        assert list(self.output) == [
            "contracts/Token.sol:Token",
            "contracts/Vault.sol:Vault",
            "contracts/Vault.sol:Token",
        ]
        token = self.output["contracts/Token.sol:Token"]
        assert token["functions"]["transfer(address,uint256)"]["selector"] == "a9059cbb"

    def test_merges_selected_contract(self, fixtures_path, capsys):
        """--contract limits the output to the named contracts."""
        self.given_args(
            "merge", fixtures_path / "token_output.json", "--contract", "Vault"
        )
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is_json()
        assert list(self.output) == ["contracts/Vault.sol:Vault"]
        assert self.output["contracts/Vault.sol:Vault"]["events"] == {}

    def test_writes_output_file(self, fixtures_path, tmp_path, capsys):
        """--output writes the JSON to a file instead of stdout."""
        output = tmp_path / "docs.json"
        self.given_args(
            "merge",
            fixtures_path / "token_output.json",
            "-c",
            "contracts/Token.sol:Token",
            "-o",
            output,
        )
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_zero()
        assert self.captured.out == ""
        merged = json.loads(output.read_text())
        assert merged["contracts/Token.sol:Token"]["author"] == "Example Labs"

    def test_reports_stale_selector_map(self, fixtures_path, capsys):
        """A function missing from methodIdentifiers fails the merge."""
        self.given_args("merge", fixtures_path / "stale_build_info.json")
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_nonzero()
        self.then_stderr_contains("increment(uint64)")
        assert self.captured.out == ""

    def test_reports_ambiguous_contract(self, fixtures_path, capsys):
        self.given_args("merge", fixtures_path / "token_output.json", "-c", "Token")
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_nonzero()
        self.then_stderr_contains("ambiguous")

    def test_reports_missing_file(self, tmp_path, capsys):
        self.given_args("merge", tmp_path / "missing.json")
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_nonzero()
        self.then_stderr_contains("Error:")

    def test_returns_nonzero_without_command(self, capsys):
        """CLI prints usage and fails when no command is given."""
        self.given_args()
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_nonzero()
        assert "usage" in self.captured.err.lower()

    def test_returns_nonzero_for_missing_path(self, capsys):
        self.given_args("merge")
        self.when_cli_is_run(capsys)
        self.then_exit_code_is_nonzero()
