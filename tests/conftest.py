"""Shared pytest fixtures for blog-build tests."""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from blog_build.config import AppConfig


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_output(tmp_path):
    """Create a generated site directory with nested files."""
    output_dir = tmp_path / "output"
    (output_dir / "posts" / "hello-world").mkdir(parents=True)
    (output_dir / "assets").mkdir()

    (output_dir / "index.html").write_text("<html><body>Home</body></html>")
    (output_dir / "posts" / "hello-world" / "index.html").write_text("<h1>Hello</h1>")
    (output_dir / "assets" / "style.css").write_text("body { margin: 0; }")
    (output_dir / "feed.rss").write_bytes(b"<rss></rss>")

    return output_dir


@pytest.fixture
def app_config(tmp_path):
    """AppConfig pointing at temporary input/output paths."""
    config = AppConfig()
    config.paths.input_dir = tmp_path / "input"
    config.paths.output_dir = tmp_path / "output"
    config.paths.archive_path = tmp_path / "output.zip"
    config.generator.executable = "wyam"
    config.deploy.site = "test.netlify.com"
    config.paths.input_dir.mkdir()
    return config


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file."""
    config_file = tmp_path / "blog-build.yaml"
    config_file.write_text(
        f"""
paths:
  input_dir: "{tmp_path / "input"}"
  output_dir: "{tmp_path / "output"}"
  archive_path: "{tmp_path / "output.zip"}"

generator:
  executable: "wyam"
  recipe: "Blog"
  theme: "Phantom"
  update_packages: false

deploy:
  site: "sample.netlify.com"

logging:
  level: "WARNING"
"""
    )
    (tmp_path / "input").mkdir()
    return config_file


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for tests that call the generator."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


@pytest.fixture(name="_mock_shutil_which")
def mock_shutil_which():
    """Mock shutil.which to simulate available tools."""

    def which_side_effect(tool):
        available = {"wyam", "dotnet"}
        return f"/usr/bin/{tool}" if tool in available else None

    with patch("shutil.which", side_effect=which_side_effect) as mock:
        yield mock


@pytest.fixture
def no_credential(monkeypatch):
    """Ensure the deploy token is not set."""
    monkeypatch.delenv("netlify_token", raising=False)


@pytest.fixture
def credential(monkeypatch):
    """Set a fake deploy token."""
    monkeypatch.setenv("netlify_token", "s3cr3t-token")
    return "s3cr3t-token"
