"""
CLI module - Command line interface for Blog Build

Entry point for the `blog-build` command using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import AppConfig, load_config
from .constants import DEFAULT_TARGET, EXIT_INTERRUPTED
from .errors import BlogBuildError, ConfigurationError
from .runners import RunnerCallbacks, RunnerResult, SequentialRunner
from .tools import check_tools_status, credential_is_set
from .workflow import create_site_workflow

console = Console()
app = typer.Typer(
    name="blog-build",
    help="Blog Build - clean, build, preview and deploy the blog.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    if value:
        console.print(f"blog-build version {__version__}")
        raise typer.Exit()


# Type aliases for common options
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config file", exists=True, dir_okay=False),
]


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def get_config(
    config_path: Path | None = None,
    input_dir: Path | None = None,
    output_dir: Path | None = None,
) -> AppConfig:
    """Load configuration and apply CLI path overrides."""
    try:
        return load_config(config_path).with_overrides(input_dir=input_dir, output_dir=output_dir)
    except ConfigurationError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
):
    """Blog Build - clean, build, preview and deploy the blog."""
    pass


@app.command()
def run(
    target: Annotated[str, typer.Argument(help="Target to run (see targets)")] = DEFAULT_TARGET,
    input_dir: Annotated[Path | None, typer.Option("--input", "-i", help="Site source directory")] = None,
    output_dir: Annotated[Path | None, typer.Option("--output", "-o", help="Generated site directory")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show the tasks that would run")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
    config: ConfigOption = None,
):
    """
    Run a target and its prerequisites.

    [bold]Examples:[/bold]

        blog-build run                 # Clean, then preview with live reload

        blog-build run Build -o ./public

        netlify_token=... blog-build run AppVeyor
    """
    cfg = get_config(config, input_dir, output_dir)
    configure_logging("DEBUG" if verbose else cfg.logging.level)

    graph = create_site_workflow(cfg)

    def on_run_start(name: str, order: list[str]):
        label = "Would run" if dry_run else "Running"
        console.print(f"[bold]{label}:[/bold] {name} ({' -> '.join(order)})")

    def on_task_start(name: str, description: str):
        console.print(f"  [cyan]{name}[/cyan] {description}...")

    def on_task_complete(name: str, success: bool):
        if success:
            console.print(f"  [green]✓[/green] {name}")
        else:
            console.print(f"  [red]✗[/red] {name}")

    def on_run_complete(result: RunnerResult):
        if dry_run:
            console.print("\n[dim]Dry run - no tasks executed. Remove --dry-run to execute.[/dim]")
        elif result.success:
            console.print(f"\n[bold]Complete:[/bold] {result.tasks_completed} tasks")

    callbacks = RunnerCallbacks(
        on_run_start=on_run_start,
        on_task_start=on_task_start,
        on_task_complete=on_task_complete,
        on_run_complete=on_run_complete,
    )

    runner = SequentialRunner(dry_run=dry_run)
    try:
        runner.run(graph, target, callbacks)
    except BlogBuildError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(EXIT_INTERRUPTED) from None


@app.command()
def targets(config: ConfigOption = None):
    """List available targets and their dependencies."""
    cfg = get_config(config)
    graph = create_site_workflow(cfg)

    table = Table(title="Targets")
    table.add_column("Target", style="cyan")
    table.add_column("Depends on")
    table.add_column("Description", style="dim")

    for task in graph.tasks.values():
        name = f"{task.name} (default)" if task.name == graph.default_target else task.name
        table.add_row(name, ", ".join(task.depends_on) or "-", task.description)

    console.print(table)


@app.command()
def check(config: ConfigOption = None):
    """Check external tools and the deploy credential."""
    cfg = get_config(config)
    tools = check_tools_status(cfg)

    table = Table(title="System Dependencies")
    table.add_column("Tool", style="cyan")
    table.add_column("Status")
    table.add_column("Path", style="dim")

    for tool, path in tools.items():
        if path:
            table.add_row(tool, "[green]Available[/green]", str(path))
        else:
            table.add_row(tool, "[red]Missing[/red]", "-")

    token_env = cfg.deploy.token_env
    if credential_is_set(cfg):
        table.add_row(f"${token_env}", "[green]Set[/green]", "-")
    else:
        table.add_row(f"${token_env}", "[yellow]Not set[/yellow]", "-")

    console.print(table)

    if tools.get(cfg.generator.executable) is None:
        console.print(f"\n[yellow]Warning:[/yellow] {cfg.generator.executable} not found.")
        console.print(f"Install it with: dotnet tool install -g {cfg.generator.executable}.tool")
    if not credential_is_set(cfg):
        console.print(f"\n[dim]Deploy and AppVeyor targets need ${token_env}.[/dim]")


if __name__ == "__main__":
    app()
