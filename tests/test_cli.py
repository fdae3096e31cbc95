"""
Tests for settings and the command-line entry point.
"""
import pytest
from pydantic import SecretStr, ValidationError
from unittest.mock import AsyncMock, patch

from sdlauncher import cli
from sdlauncher.config import DEFAULT_API_URI, LauncherSettings, get_settings
from sdlauncher.errors import BuildFetchError
from sdlauncher.launch import LaunchResult
from sdlauncher.scm import parse_scm_url
from sdlauncher.screwdriver import Build, Job, Pipeline
from sdlauncher.workspace import DEFAULT_WORKSPACE_ROOT

SD_ENV = ("SD_API_URI", "SD_TOKEN", "SD_WORKSPACE_ROOT", "SD_HTTP_TIMEOUT", "SD_LOG_LEVEL", "SD_LOG_HTTP")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start each test with no SD_* variables and a fresh settings cache."""
    for name in SD_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def launch_result():
    scm_url = "git@github.com:screwdriver-cd/launcher.git#master"
    return LaunchResult(
        build=Build(id="1", job_id="2"),
        job=Job(id="2", pipeline_id="3"),
        pipeline=Pipeline(id="3", scm_url=scm_url),
        scm=parse_scm_url(scm_url),
        workspace=f"{DEFAULT_WORKSPACE_ROOT}/src/screwdriver-cd/launcher.git",
    )


class TestSettings:
    """Tests for LauncherSettings and get_settings()."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.api_uri == DEFAULT_API_URI
        assert settings.workspace_root == DEFAULT_WORKSPACE_ROOT
        assert settings.token.get_secret_value() == ""
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SD_API_URI", "https://sd.example.com/v4")
        monkeypatch.setenv("SD_TOKEN", "secret")
        monkeypatch.setenv("SD_WORKSPACE_ROOT", "/sd/workspace")
        monkeypatch.setenv("SD_HTTP_TIMEOUT", "5")
        monkeypatch.setenv("SD_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.api_uri == "https://sd.example.com/v4"
        assert settings.token.get_secret_value() == "secret"
        assert settings.workspace_root == "/sd/workspace"
        assert settings.http_timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_token_not_in_repr(self):
        settings = LauncherSettings(token="super-secret")
        assert "super-secret" not in repr(settings)

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_log_level_is_normalized(self):
        assert LauncherSettings(log_level="warning").log_level == "WARNING"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            LauncherSettings(log_level="LOUD")

    def test_log_http_from_environment(self, monkeypatch):
        monkeypatch.setenv("SD_LOG_HTTP", "true")
        assert get_settings().log_http is True


class TestMain:
    """Tests for cli.main()."""

    def test_missing_token(self):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            assert cli.main(["123"]) == cli.ExitCode.CONFIG_ERROR
            mock_launch.assert_not_called()

    def test_success(self, launch_result):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.return_value = launch_result

            code = cli.main(["123", "--token", "abc", "--workspace-root", "/ws"])

        assert code == cli.ExitCode.SUCCESS
        args, kwargs = mock_launch.call_args
        assert args[1] == "123"
        assert kwargs["workspace_root"] == "/ws"

    def test_client_built_from_flags(self, launch_result):
        """Flags win over environment when building the API client."""
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.return_value = launch_result

            cli.main(["123", "--token", "abc", "--api-uri", "https://sd.example.com/v4"])

        client = mock_launch.call_args.args[0]
        assert client.config.token == "abc"
        assert client.config.base_url == "https://sd.example.com/v4"

    def test_token_from_environment(self, monkeypatch, launch_result):
        monkeypatch.setenv("SD_TOKEN", "from-env")
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.return_value = launch_result

            assert cli.main(["123"]) == cli.ExitCode.SUCCESS

        assert mock_launch.call_args.args[0].config.token == "from-env"

    def test_launch_error(self, caplog):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.side_effect = BuildFetchError("123", reason="boom")

            code = cli.main(["123", "--token", "abc"])

        assert code == cli.ExitCode.LAUNCH_FAILED
        assert 'fetching build ID "123"' in caplog.text

    def test_requires_build_id(self):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_token_flag_is_secret(self):
        """--token is validated into a SecretStr like the environment value."""
        args = cli.build_parser().parse_args(["123", "--token", "abc"])
        settings = cli._merge_settings(args, get_settings())

        assert isinstance(settings.token, SecretStr)
        assert settings.token.get_secret_value() == "abc"
        assert "abc" not in repr(settings)

    def test_empty_api_uri_flag(self):
        """Flag values go through the same validation as settings."""
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            code = cli.main(["123", "--token", "abc", "--api-uri", ""])

        assert code == cli.ExitCode.CONFIG_ERROR
        mock_launch.assert_not_called()

    def test_invalid_timeout_in_environment(self, monkeypatch):
        monkeypatch.setenv("SD_HTTP_TIMEOUT", "abc")
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            code = cli.main(["123", "--token", "abc"])

        assert code == cli.ExitCode.CONFIG_ERROR
        mock_launch.assert_not_called()

    def test_unknown_log_level_flag(self):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            code = cli.main(["123", "--token", "abc", "--log-level", "loud"])

        assert code == cli.ExitCode.CONFIG_ERROR
        mock_launch.assert_not_called()

    def test_log_http_flag_enables_client_logging(self, launch_result):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.return_value = launch_result

            cli.main(["123", "--token", "abc", "--log-http"])

        config = mock_launch.call_args.args[0].config
        assert config.log_requests is True
        assert config.log_responses is True

    def test_client_logging_off_by_default(self, launch_result):
        with patch.object(cli, "launch", new_callable=AsyncMock) as mock_launch:
            mock_launch.return_value = launch_result

            cli.main(["123", "--token", "abc"])

        config = mock_launch.call_args.args[0].config
        assert config.log_requests is False
