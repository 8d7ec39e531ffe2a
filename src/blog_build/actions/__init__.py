"""
Actions layer - Plain Python functions behind each build task.

All functions are CLI-agnostic: they return typed results or raise
errors from ``blog_build.errors``.
"""

from .clean import CleanResult, clean_output
from .deploy import DeployResult, deploy_site, read_credential, upload_archive
from .generate import BuildConfiguration, GenerateResult, build_command, run_generator
from .package import PackageResult, create_archive

__all__ = [
    "clean_output",
    "CleanResult",
    "BuildConfiguration",
    "build_command",
    "run_generator",
    "GenerateResult",
    "create_archive",
    "PackageResult",
    "read_credential",
    "upload_archive",
    "deploy_site",
    "DeployResult",
]
