"""Tests for loading solc compiler output."""

from pathlib import Path

import pytest

from natspec_docgen.artifacts import (
    ArtifactLoadError,
    find_contract,
    iter_contract_sources,
    load_compiler_output,
)


@pytest.fixture
def fixtures_path():
    """Path to test fixtures."""
    return Path(__file__).parent / "fixtures"


class TestLoadCompilerOutput:
    def given_path(self, path):
        self.path = path

    def when_output_is_loaded(self):
        self.output = load_compiler_output(self.path)

    def when_load_fails(self):
        with pytest.raises(ArtifactLoadError) as exc_info:
            load_compiler_output(self.path)
        self.error = exc_info.value

    def then_error_phase_is(self, phase):
        assert self.error.phase == phase

    def test_loads_standard_json_output(self, fixtures_path):
        """A solc standard-JSON output is returned as is."""
        self.given_path(fixtures_path / "token_output.json")
        self.when_output_is_loaded()
        assert "contracts/Token.sol" in self.output["contracts"]

    def test_unwraps_hardhat_build_info(self, fixtures_path):
        """A Hardhat build-info file yields its nested solc output."""
        self.given_path(fixtures_path / "stale_build_info.json")
        self.when_output_is_loaded()
        assert list(self.output["contracts"]) == ["contracts/Counter.sol"]

    def test_missing_file(self, tmp_path):
        self.given_path(tmp_path / "missing.json")
        self.when_load_fails()
        self.then_error_phase_is("reading")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        self.given_path(path)
        self.when_load_fails()
        self.then_error_phase_is("parsing")

    def test_json_without_contracts(self, tmp_path):
        path = tmp_path / "abi.json"
        path.write_text("[]")
        self.given_path(path)
        self.when_load_fails()
        self.then_error_phase_is("parsing")


@pytest.fixture
def compiler_output(fixtures_path):
    return load_compiler_output(fixtures_path / "token_output.json")


class TestContractLookup:
    def test_iterates_all_contracts_in_order(self, compiler_output):
        names = [c.qualified_name for c in iter_contract_sources(compiler_output)]
        assert names == [
            "contracts/Token.sol:Token",
            "contracts/Vault.sol:Vault",
            "contracts/Vault.sol:Token",
        ]

    def test_finds_contract_by_name(self, compiler_output):
        vault = find_contract(compiler_output, "Vault")
        assert vault.source == "contracts/Vault.sol"
        assert vault.evm["methodIdentifiers"]

    def test_finds_contract_by_qualified_name(self, compiler_output):
        token = find_contract(compiler_output, "contracts/Token.sol:Token")
        assert token.devdoc["author"] == "Example Labs"

    def test_ambiguous_name(self, compiler_output):
        with pytest.raises(ArtifactLoadError) as exc_info:
            find_contract(compiler_output, "Token")
        assert exc_info.value.phase == "lookup"
        assert "ambiguous" in str(exc_info.value)

    def test_unknown_name(self, compiler_output):
        with pytest.raises(ArtifactLoadError) as exc_info:
            find_contract(compiler_output, "Missing")
        assert exc_info.value.phase == "lookup"
