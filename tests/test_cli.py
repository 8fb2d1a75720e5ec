"""
Tests for CLI commands — apply, config check, tools, and global options.
"""

import json

import pytest
from click.testing import CliRunner

from upset.adapters.shell.command import ShellCommand
from upset.main import cli

DOWNLOADS_CONFIG = """\
    version: 1.0
    configuration:
      downloads:
        - download_manager: wget
          destination_folder: ~/Downloads
          files:
            - https://bartkessels.net/download/upset
            - https://bartkessels.net/download/it-depends
"""


@pytest.fixture
def no_tools(monkeypatch):
    """Every external tool reports as not installed."""
    monkeypatch.setattr(ShellCommand, "is_available", lambda self: False)


@pytest.fixture
def all_tools_succeed(monkeypatch):
    monkeypatch.setattr(ShellCommand, "is_available", lambda self: True)
    monkeypatch.setattr(ShellCommand, "execute", lambda self, arguments: True)


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "set up your computer in no time" in result.output
        assert "--configuration-file" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestApplyCommand:
    def test_missing_config(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(tmp_path / "missing.yml"), "apply"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_unsupported_version(self, write_config, no_tools):
        config = write_config("version: 2.0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--configuration-file", str(config), "apply"])
        assert result.exit_code == 1
        assert "Unsupported specification version: 2.0" in result.output

    def test_invalid_yaml(self, write_config):
        config = write_config("version: [1.0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "apply"])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_empty_configuration(self, write_config):
        config = write_config("version: 1.0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "apply"])
        assert result.exit_code == 0
        assert "Nothing to do." in result.output

    def test_missing_tool_warns_and_exits_zero(self, write_config, no_tools):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "apply"])

        assert result.exit_code == 0
        assert "⚠ Unable to download https://bartkessels.net/download/upset" in result.output
        assert "⚠ Unable to download https://bartkessels.net/download/it-depends" in result.output
        assert "downloads (wget): 0 succeeded / 2 failed" in result.output

    def test_success(self, write_config, all_tools_succeed):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "apply", "--output", "plain"])

        assert result.exit_code == 0
        assert "… Downloading https://bartkessels.net/download/upset" in result.output
        assert "✓ Successfully downloaded https://bartkessels.net/download/upset" in result.output
        assert "2 succeeded / 0 failed" in result.output

    def test_quiet_hides_summary(self, write_config, all_tools_succeed):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-q", "-c", str(config), "apply"])
        assert result.exit_code == 0
        assert "succeeded /" not in result.output

    def test_unsupported_tool_skipped(self, write_config, all_tools_succeed):
        config = write_config("""\
            version: 1.0
            configuration:
              version_control:
                - vcs: mercurial
                  destination_folder: .
                  repositories: [repo]
        """)
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "-c", str(config), "apply"])
        assert result.exit_code == 0
        assert "Cloning" not in result.output
        assert "'mercurial' not supported" in result.output

    def test_strict_rejects_unsupported_tool(self, write_config, all_tools_succeed):
        config = write_config("""\
            version: 1.0
            configuration:
              version_control:
                - vcs: mercurial
                  destination_folder: .
                  repositories: [repo]
        """)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "apply", "--strict"])
        assert result.exit_code == 1
        assert "Unsupported tools" in result.output

    def test_json(self, write_config, no_tools):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "apply", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["report"]["failed"] == 2
        assert data["report"]["batches"][0]["tool"] == "wget"

    def test_json_error(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(tmp_path / "nope.yml"), "apply", "--json"])
        assert result.exit_code == 1
        assert "error" in json.loads(result.stdout)


class TestConfigCheckCommand:
    def test_valid(self, write_config):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Downloads: 1" in result.output

    def test_unsupported_version(self, write_config):
        config = write_config("version: 2.0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "config", "check"])
        assert result.exit_code == 1
        assert "Configuration errors" in result.output

    def test_warnings(self, write_config):
        config = write_config("version: 1.0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Nothing will be done" in result.output

    def test_json(self, write_config):
        config = write_config(DOWNLOADS_CONFIG)
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", str(config), "config", "check", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["valid"] is True
        assert data["version"] == 1.0


class TestToolsCommand:
    def test_lists_tools(self, monkeypatch):
        monkeypatch.setattr(ShellCommand, "is_available", lambda self: self.name == "git")
        runner = CliRunner()
        result = runner.invoke(cli, ["tools"])
        assert result.exit_code == 0
        assert "✅ git (version_control)" in result.output
        assert "❌ winget (packages)" in result.output

    def test_json(self, no_tools):
        runner = CliRunner()
        result = runner.invoke(cli, ["tools", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["missing"] == ["winget", "git", "wget"]
