"""Error types raised by tasks, the task graph and the runner."""


class BlogBuildError(Exception):
    """Base class for all build and deploy failures."""


class UnknownTargetError(BlogBuildError):
    """A requested target (or a declared dependency) is not registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        message = f"Unknown target: {name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class DuplicateTaskError(BlogBuildError):
    """A task name was registered twice on the same graph."""


class CyclicDependencyError(BlogBuildError):
    """Task dependencies form a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Dependency cycle: {' -> '.join(cycle)}")


class MissingCredentialError(BlogBuildError):
    """The deploy credential is absent or blank in the environment."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"Deploy credential not set (export {env_var})")


class ExternalToolError(BlogBuildError):
    """An external tool or service returned a failure."""

    def __init__(self, tool: str, message: str, returncode: int | None = None):
        self.tool = tool
        self.returncode = returncode
        detail = f"{tool} failed"
        if returncode is not None:
            detail += f" (exit code {returncode})"
        super().__init__(f"{detail}: {message}" if message else detail)


class ConfigurationError(BlogBuildError):
    """A configuration value is missing or has the wrong type."""
