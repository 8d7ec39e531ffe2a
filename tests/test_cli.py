"""Tests for CLI commands using Typer's CliRunner."""

from unittest.mock import patch

from blog_build.cli import app
from blog_build.errors import ExternalToolError


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_version_option(self, cli_runner):
        """Test --version displays version."""
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_option(self, cli_runner):
        """Test --help displays help."""
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Blog Build" in result.output
        assert "run" in result.output
        assert "targets" in result.output


class TestRunCommand:
    """Tests for run command."""

    def test_run_help(self, cli_runner):
        """Test run --help shows options."""
        result = cli_runner.invoke(app, ["run", "--help"])
        assert result.exit_code == 0
        assert "--dry-run" in result.output
        assert "--output" in result.output

    def test_unknown_target(self, cli_runner, sample_config, tmp_path):
        """Test unknown target exits 1 without touching output."""
        result = cli_runner.invoke(app, ["run", "Publish", "--config", str(sample_config)])

        assert result.exit_code == 1
        assert "Unknown target: Publish" in result.output
        assert not (tmp_path / "output").exists()

    def test_dry_run_default(self, cli_runner, sample_config, tmp_path):
        """Test dry run of the default target lists Clean then Preview."""
        with patch("blog_build.workflow.site.run_generator") as mock_generator:
            result = cli_runner.invoke(app, ["run", "--dry-run", "--config", str(sample_config)])

        assert result.exit_code == 0
        assert "Clean -> Preview -> Default" in result.output
        assert "Dry run" in result.output
        mock_generator.assert_not_called()
        assert not (tmp_path / "output").exists()

    def test_clean(self, cli_runner, sample_config, tmp_path):
        """Test Clean target creates an empty output directory."""
        result = cli_runner.invoke(app, ["run", "Clean", "--config", str(sample_config)])

        assert result.exit_code == 0
        assert (tmp_path / "output").is_dir()
        assert "Complete" in result.output

    def test_output_override(self, cli_runner, sample_config, tmp_path):
        """Test --output replaces the configured output directory."""
        public = tmp_path / "public"
        result = cli_runner.invoke(app, ["run", "Clean", "-o", str(public), "--config", str(sample_config)])

        assert result.exit_code == 0
        assert public.is_dir()
        assert not (tmp_path / "output").exists()

    def test_generator_failure(self, cli_runner, sample_config):
        """Test generator failure exits 1 with the error message."""
        error = ExternalToolError("wyam", "Theme not found", returncode=1)
        with patch("blog_build.workflow.site.run_generator", side_effect=error):
            result = cli_runner.invoke(app, ["run", "Build", "--config", str(sample_config)])

        assert result.exit_code == 1
        assert "Theme not found" in result.output

    def test_deploy_without_credential(self, cli_runner, sample_config, no_credential):
        """Test Deploy without token exits 1 and names the variable."""
        with patch("urllib.request.urlopen") as mock_urlopen:
            result = cli_runner.invoke(app, ["run", "Deploy", "--config", str(sample_config)])

        assert result.exit_code == 1
        assert "netlify_token" in result.output
        mock_urlopen.assert_not_called()

    def test_deploy_without_site(self, cli_runner, tmp_path, credential, monkeypatch):
        """Test Deploy without a configured site exits 1 before uploading."""
        monkeypatch.delenv("BLOG_BUILD_SITE", raising=False)
        config_file = tmp_path / "blog-build.yaml"
        config_file.write_text(
            f'paths:\n  output_dir: "{tmp_path / "output"}"\n  archive_path: "{tmp_path / "output.zip"}"\n'
        )
        (tmp_path / "output").mkdir()

        with patch("urllib.request.urlopen") as mock_urlopen:
            result = cli_runner.invoke(app, ["run", "Deploy", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "deploy.site" in result.output
        mock_urlopen.assert_not_called()
        assert not (tmp_path / "output.zip").exists()

    def test_invalid_config_value(self, cli_runner, tmp_path):
        """Test a malformed boolean in the config exits 1 with the key name."""
        config_file = tmp_path / "blog-build.yaml"
        config_file.write_text('generator:\n  update_packages: "maybe"\n')

        result = cli_runner.invoke(app, ["run", "Clean", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "generator.update_packages" in result.output
        assert not (tmp_path / "output").exists()

    def test_preview_interrupted(self, cli_runner, sample_config):
        """Test operator interrupt during preview exits 130."""
        with patch("blog_build.workflow.site.run_generator", side_effect=KeyboardInterrupt):
            result = cli_runner.invoke(app, ["run", "Preview", "--config", str(sample_config)])

        assert result.exit_code == 130
        assert "Interrupted" in result.output


class TestTargetsCommand:
    """Tests for targets command."""

    def test_lists_targets(self, cli_runner, sample_config):
        """Test all targets are listed."""
        result = cli_runner.invoke(app, ["targets", "--config", str(sample_config)])

        assert result.exit_code == 0
        for name in ("Clean", "Build", "Preview", "Deploy", "Default", "AppVeyor"):
            assert name in result.output


class TestCheckCommand:
    """Tests for check command."""

    def test_check_shows_dependencies(self, cli_runner, sample_config, _mock_shutil_which, no_credential):
        """Test check command shows dependency status."""
        result = cli_runner.invoke(app, ["check", "--config", str(sample_config)])

        assert result.exit_code == 0
        assert "System Dependencies" in result.output
        assert "wyam" in result.output
        assert "Not set" in result.output

    def test_check_hides_credential(self, cli_runner, sample_config, _mock_shutil_which, credential):
        """Test the token value is never printed."""
        result = cli_runner.invoke(app, ["check", "--config", str(sample_config)])

        assert result.exit_code == 0
        assert credential not in result.output
        assert "Set" in result.output
