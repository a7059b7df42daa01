"""Tests for the deploy and plan CLI commands."""

import json
from pathlib import Path

import pytest
import sample_target
import yaml
from chaindeploy.cli.deploy import deploy_command
from chaindeploy.cli.plan import plan_command
from chaindeploy.core.errors import ExitCode
from chaindeploy.main import build_parser, main

REGISTRY = "0x" + "ee" * 20


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """No stray deploy files, fresh sample ledger, no failing contracts."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "nohome")
    sample_target.LEDGER.clear()
    monkeypatch.setattr(sample_target, "FAILING", set())


def read_json(capsys):
    return json.loads(capsys.readouterr().out)


class TestDeployCommand:
    def test_json_output_success(self, capsys):
        code = deploy_command(target="sample_target", output_format="json")

        output = read_json(capsys)
        assert code == ExitCode.SUCCESS
        assert list(output["contracts"]) == [
            "StateCommitmentChain",
            "CanonicalTransactionChain",
            "L1CrossDomainMessenger",
        ]
        assert output["failed_deployments"] == []
        assert output["success"] is True

    def test_partial_failure_exit_code(self, capsys, monkeypatch):
        monkeypatch.setattr(sample_target, "FAILING", {"CanonicalTransactionChain"})

        code = deploy_command(target="sample_target", output_format="json")

        output = read_json(capsys)
        assert code == ExitCode.WARNING
        assert output["failed_deployments"] == ["CanonicalTransactionChain"]
        assert "CanonicalTransactionChain" not in output["contracts"]

    def test_only_and_existing_registry(self, capsys):
        code = deploy_command(
            target="sample_target",
            only=["L1CrossDomainMessenger"],
            registry_address=REGISTRY,
            output_format="json",
        )

        output = read_json(capsys)
        assert code == ExitCode.SUCCESS
        assert output["registry"] == REGISTRY
        assert list(output["contracts"]) == ["L1CrossDomainMessenger"]
        assert ("deploy", "Lib_AddressManager") not in sample_target.LEDGER

    def test_deploy_file_used(self, tmp_path, capsys):
        path = tmp_path / "deploy.yaml"
        path.write_text(yaml.safe_dump({"dependencies": ["StateCommitmentChain"], "overrides": {"gas_limit": 1}}))

        code = deploy_command(target="sample_target", config_path=str(path), output_format="json")

        assert code == ExitCode.SUCCESS
        assert list(read_json(capsys)["contracts"]) == ["StateCommitmentChain"]

    def test_text_output(self, capsys, monkeypatch):
        monkeypatch.setattr(sample_target, "FAILING", {"StateCommitmentChain"})

        deploy_command(target="sample_target")

        out = capsys.readouterr().out
        assert "Deployed 2 contracts, 1 failed" in out
        assert "StateCommitmentChain" in out

    def test_bad_registry_address(self):
        assert deploy_command(target="sample_target", registry_address="0x12") == ExitCode.CONFIG_ERROR

    def test_unknown_target(self):
        assert deploy_command(target="not_a_real_target") == ExitCode.CONFIG_ERROR


class TestPlanCommand:
    def test_json_lists_entries_without_deploying(self, capsys):
        code = plan_command(target="sample_target", only=["StateCommitmentChain"], output_format="json")

        output = read_json(capsys)
        assert code == 0
        assert [e["contract"] for e in output["entries"]] == [
            "StateCommitmentChain",
            "CanonicalTransactionChain",
            "L1CrossDomainMessenger",
        ]
        assert [e["eligible"] for e in output["entries"]] == [True, False, False]
        assert all(entry[0] != "deploy" for entry in sample_target.LEDGER)

    def test_attaches_to_configured_registry(self, capsys):
        plan_command(target="sample_target", registry_address=REGISTRY, output_format="json")

        assert sample_target.LEDGER == [("attach", "Lib_AddressManager", REGISTRY)]

    def test_text_output(self, capsys):
        assert plan_command(target="sample_target") == 0

        out = capsys.readouterr().out
        assert "new registry will be deployed" in out
        assert "L1CrossDomainMessenger" in out


class TestMain:
    def test_parser(self):
        args = build_parser().parse_args(
            ["deploy", "--target", "sample_target", "--only", "A", "B", "--output", "json"]
        )

        assert args.command == "deploy"
        assert args.only == ["A", "B"]
        assert args.output == "json"

    def test_main_exits_with_command_code(self, monkeypatch, capsys):
        monkeypatch.setattr("chaindeploy.main.configure_logging", lambda *a, **kw: None)

        with pytest.raises(SystemExit) as exc_info:
            main(["plan", "--target", "sample_target", "--output", "json"])

        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
