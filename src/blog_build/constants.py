"""
Centralized constants for Blog Build.

Target names, default paths and deploy settings live here
to avoid duplication across modules.
"""

# Target names
TARGET_CLEAN = "Clean"
TARGET_BUILD = "Build"
TARGET_PREVIEW = "Preview"
TARGET_DEPLOY = "Deploy"
TARGET_DEFAULT = "Default"
TARGET_CI = "AppVeyor"

DEFAULT_TARGET = TARGET_DEFAULT

# Filesystem layout (relative to the working directory)
DEFAULT_INPUT_DIR = "input"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_ARCHIVE_NAME = "output.zip"

# Site generator
DEFAULT_GENERATOR = "wyam"
DEFAULT_RECIPE = "Blog"
DEFAULT_THEME = "CleanBlog"

# Deployment
TOKEN_ENV_VAR = "netlify_token"
DEPLOY_ENDPOINT = "https://api.netlify.com/api/v1/sites/{site}/deploys"
ARCHIVE_CONTENT_TYPE = "application/zip"

# Exit status used when the operator interrupts a run (128 + SIGINT)
EXIT_INTERRUPTED = 130
