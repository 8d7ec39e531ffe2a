"""Generate actions - Run the external static-site generator."""

import logging
import subprocess
from dataclasses import dataclass, replace
from pathlib import Path

from ..errors import ExternalToolError
from ..tools import get_tool_path

logger = logging.getLogger(__name__)

# Lines of generator stderr kept in error messages
STDERR_TAIL_LINES = 20


@dataclass(frozen=True)
class BuildConfiguration:
    """Settings passed verbatim to the site generator."""

    recipe: str
    theme: str
    update_packages: bool = False
    preview: bool = False
    watch: bool = False

    def for_preview(self) -> "BuildConfiguration":
        """Same settings with local preview server and file watching on."""
        return replace(self, preview=True, watch=True)


@dataclass
class GenerateResult:
    """Result of a generator run."""

    command: list[str]
    returncode: int = 0


def build_command(
    executable: str,
    build_config: BuildConfiguration,
    input_dir: Path,
    output_dir: Path,
) -> list[str]:
    """
    Assemble the generator command line.

    Examples:
        wyam build --recipe Blog --theme CleanBlog --update-packages --output output input
        wyam build --recipe Blog --theme CleanBlog --preview --watch --output output input
    """
    cmd = [
        executable,
        "build",
        "--recipe",
        build_config.recipe,
        "--theme",
        build_config.theme,
    ]
    if build_config.update_packages:
        cmd.append("--update-packages")
    if build_config.preview:
        cmd.append("--preview")
    if build_config.watch:
        cmd.append("--watch")
    cmd.extend(["--output", str(output_dir), str(input_dir)])
    return cmd


def _stderr_tail(stderr: str | None) -> str:
    if not stderr:
        return ""
    lines = stderr.strip().splitlines()
    return "\n".join(lines[-STDERR_TAIL_LINES:])


def run_generator(
    executable: str,
    build_config: BuildConfiguration,
    input_dir: Path,
    output_dir: Path,
) -> GenerateResult:
    """
    Run the site generator and wait for it to exit.

    In preview mode the generator serves the site and rebuilds on changes
    until it is interrupted; its output streams straight to the console.

    Raises:
        ExternalToolError: executable not found, not runnable, or non-zero exit
    """
    resolved = get_tool_path(executable)
    if resolved is None:
        raise ExternalToolError(executable, "executable not found in PATH or ~/.dotnet/tools")

    cmd = build_command(str(resolved), build_config, input_dir, output_dir)
    logger.info("Running %s", " ".join(cmd))

    try:
        if build_config.preview:
            result = subprocess.run(cmd)
        else:
            result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ExternalToolError(executable, str(e)) from e

    if result.returncode != 0:
        raise ExternalToolError(
            executable,
            _stderr_tail(result.stderr),
            returncode=result.returncode,
        )

    return GenerateResult(command=cmd, returncode=result.returncode)
