"""
Tools module - Locate external programs the build depends on.

The site generator is usually installed as a .NET global tool, so
~/.dotnet/tools is searched in addition to the system PATH.
"""

import os
import shutil
from pathlib import Path

from .config import AppConfig

# Default install location for .NET global tools
DOTNET_TOOLS_DIR = Path.home() / ".dotnet" / "tools"


def get_tool_path(tool_name: str) -> Path | None:
    """
    Find a tool in standard locations.

    Search order:
    1. System PATH
    2. .NET global tools (~/.dotnet/tools)
    """
    sys_path = shutil.which(tool_name)
    if sys_path:
        return Path(sys_path)

    dotnet_path = DOTNET_TOOLS_DIR / tool_name
    if dotnet_path.exists():
        return dotnet_path

    return None


def check_tools_status(config: AppConfig) -> dict[str, Path | None]:
    """
    Check status of all external tools.

    Returns:
        Dict mapping tool name to path (None if not found)
    """
    return {
        config.generator.executable: get_tool_path(config.generator.executable),
        "dotnet": get_tool_path("dotnet"),
    }


def credential_is_set(config: AppConfig) -> bool:
    """Whether the deploy token variable is present and non-blank."""
    return bool(os.environ.get(config.deploy.token_env, "").strip())
