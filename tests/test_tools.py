"""Tests for tools module."""

from pathlib import Path
from unittest.mock import patch

from blog_build.config import AppConfig
from blog_build.tools import check_tools_status, credential_is_set, get_tool_path


class TestGetToolPath:
    """Tests for tool path resolution."""

    def test_tool_in_path(self):
        """Test tool found in system PATH."""
        with patch("shutil.which", return_value="/usr/bin/wyam"):
            assert get_tool_path("wyam") == Path("/usr/bin/wyam")

    def test_tool_in_dotnet_tools(self, tmp_path):
        """Test tool found in .NET global tools directory."""
        (tmp_path / "wyam").touch()
        with (
            patch("shutil.which", return_value=None),
            patch("blog_build.tools.DOTNET_TOOLS_DIR", tmp_path),
        ):
            assert get_tool_path("wyam") == tmp_path / "wyam"

    def test_tool_not_found(self, tmp_path):
        """Test tool missing everywhere."""
        with (
            patch("shutil.which", return_value=None),
            patch("blog_build.tools.DOTNET_TOOLS_DIR", tmp_path),
        ):
            assert get_tool_path("wyam") is None


class TestCheckToolsStatus:
    """Tests for tool status report."""

    def test_reports_generator_and_dotnet(self, _mock_shutil_which):
        """Test status includes configured generator."""
        config = AppConfig()
        config.generator.executable = "wyam"

        tools = check_tools_status(config)

        assert tools == {"wyam": Path("/usr/bin/wyam"), "dotnet": Path("/usr/bin/dotnet")}


class TestCredentialIsSet:
    """Tests for credential presence check."""

    def test_set(self, credential):
        assert credential_is_set(AppConfig())

    def test_unset(self, no_credential):
        assert not credential_is_set(AppConfig())

    def test_blank(self, monkeypatch):
        monkeypatch.setenv("netlify_token", " ")
        assert not credential_is_set(AppConfig())
