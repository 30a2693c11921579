"""
Tests for CLI commands — resolve, targets, config check, and global options.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from targetcaps.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "targetcaps" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_resolve_text(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "node14.5"])
        assert result.exit_code == 0
        assert "node14.5" in result.output
        assert "platform:" in result.output
        assert "globalThis" in result.output

    def test_resolve_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "web", "es2020", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["targets"] == ["web", "es2020"]
        assert data["mode"] == "all"
        assert data["properties"]["web"] is True
        assert data["properties"]["module"] is True

    def test_resolve_any(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "node12", "web", "--any", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["mode"] == "any"
        assert data["properties"]["node"] is True
        assert data["properties"]["web"] is True

    def test_resolve_unknown(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "bogus"])
        assert result.exit_code == 1
        assert "Unknown target 'bogus'" in result.output
        assert "esX" in result.output

    def test_resolve_unknown_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "bogus", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert "error" in data
        assert len(data["supported"]) == 7

    def test_resolve_from_config(self, tmp_path: Path):
        config = tmp_path / "targets.yml"
        config.write_text(textwrap.dedent("""\
            targets:
              - webworker
              - es2015
        """))
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "resolve", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["targets"] == ["webworker", "es2015"]
        assert data["properties"]["importScripts"] is True

    def test_resolve_without_targets_or_config(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["resolve"])
        assert result.exit_code == 1
        assert "No targets.yml found" in result.output


class TestTargetsCommands:
    """Tests for the targets sub-commands."""

    def test_list(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["targets", "list"])
        assert result.exit_code == 0
        assert "[async-]node[X[.Y]]" in result.output
        assert "Web Worker" in result.output

    def test_list_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["targets", "list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [d["name"] for d in data][-1] == "esX"

    def test_check_known(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["targets", "check", "electron11-renderer"])
        assert result.exit_code == 0
        assert "electron[X[.Y]]-preload" in result.output

    def test_check_unknown(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["targets", "check", "deno1"])
        assert result.exit_code == 1
        assert "Unknown target 'deno1'" in result.output

    def test_check_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["targets", "check", "es5", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"target": "es5", "supported": True, "pattern": "esX"}


class TestConfigCheckCommand:
    """Tests for the config check command."""

    def test_valid_config(self, tmp_path: Path):
        config = tmp_path / "targets.yml"
        config.write_text("targets: [web, es2020]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "valid" in result.output
        assert "Targets: web, es2020" in result.output
        assert "Merge:   all" in result.output

    def test_valid_config_without_targets(self, tmp_path: Path):
        config = tmp_path / "targets.yml"
        config.write_text("targets: []\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Targets: (none)" in result.output
        assert "No targets listed" in result.output

    def test_invalid_config(self, tmp_path: Path):
        config = tmp_path / "targets.yml"
        config.write_text("targets: [web, bogus]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 1
        assert "Unknown target: bogus" in result.output

    def test_json(self, tmp_path: Path):
        config = tmp_path / "targets.yml"
        config.write_text("targets: [web, web]\n")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--config", str(config), "config", "check", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["warnings"] == ["Duplicate targets: web"]
