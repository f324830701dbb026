"""Tests for configuration loading and the CLI entry point."""
import pytest
from typer.testing import CliRunner

import xgpt.cli.app as cli_app
import xgpt.cli.config as cli_config
from xgpt.llm import ConfigurationError
from xgpt.session import Mode

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the real environment and env file."""
    for name in ("API_KEY", "MODEL", "BASE_URL"):
        # setenv first so teardown also removes values loaded by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(cli_config, "CONFIG_FILE", tmp_path / "missing.env")


class TestLoadSettings:
    """Tests for settings resolution."""

    def test_missing_key_raises(self):
        with pytest.raises(ConfigurationError, match="No API key"):
            cli_config.load_settings()

    def test_defaults(self):
        settings = cli_config.load_settings(apikey="sk-cli")
        assert settings.api_key == "sk-cli"
        assert settings.model == "gpt-4"
        assert settings.base_url == "https://api.openai.com/v1"
        assert settings.mode is Mode.STREAMING
        assert settings.initial_prompt is None

    def test_environment_key_wins_over_option(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "sk-env")
        assert cli_config.load_settings(apikey="sk-cli").api_key == "sk-env"

    def test_env_file_is_loaded(self, tmp_path, monkeypatch):
        env_file = tmp_path / "xgpt.env"
        env_file.write_text("API_KEY=sk-file\nMODEL=gpt-4o\n")

        settings = cli_config.load_settings(config_file=env_file)

        assert settings.api_key == "sk-file"
        assert settings.model == "gpt-4o"

    def test_model_option_and_markdown(self, monkeypatch):
        monkeypatch.setenv("MODEL", "gpt-env")
        settings = cli_config.load_settings(
            apikey="sk", model="gpt-cli", markdown=True, initial_prompt="hi"
        )
        assert settings.model == "gpt-cli"
        assert settings.mode is Mode.RENDERED
        assert settings.initial_prompt == "hi"

    def test_settings_are_frozen(self):
        settings = cli_config.load_settings(apikey="sk")
        with pytest.raises(ValueError):
            settings.model = "other"  # type: ignore


class TestChatCommand:
    """Tests for the xgpt command."""

    def test_missing_key_exits_non_zero(self, monkeypatch):
        async def never(settings, console):
            raise AssertionError("chat loop must not start")

        monkeypatch.setattr(cli_app, "run_chat", never)

        result = runner.invoke(cli_app.app, [])

        assert result.exit_code == 1
        assert "No API key provided" in result.output

    def test_options_reach_the_chat_loop(self, monkeypatch):
        seen = {}

        async def fake_run_chat(settings, console):
            seen["settings"] = settings
            return 0

        monkeypatch.setattr(cli_app, "run_chat", fake_run_chat)

        result = runner.invoke(
            cli_app.app, ["--apikey", "sk-cli", "--markdown", "--model", "gpt-4o", "Hello"]
        )

        assert result.exit_code == 0
        settings = seen["settings"]
        assert settings.api_key == "sk-cli"
        assert settings.model == "gpt-4o"
        assert settings.mode is Mode.RENDERED
        assert settings.initial_prompt == "Hello"
