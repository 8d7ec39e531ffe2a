"""
Site workflow factory - Registers the blog's build and deploy targets.

Targets:
1. Clean    - empty the output directory
2. Build    - Clean, then run the generator once
3. Preview  - Clean, then serve locally and rebuild on change
4. Deploy   - package the output and upload it
5. Default  - Clean, Preview
6. AppVeyor - Clean, Build, Deploy (CI)
"""

from ..actions import BuildConfiguration, clean_output, deploy_site, run_generator
from ..config import AppConfig
from ..constants import (
    DEFAULT_TARGET,
    TARGET_BUILD,
    TARGET_CI,
    TARGET_CLEAN,
    TARGET_DEFAULT,
    TARGET_DEPLOY,
    TARGET_PREVIEW,
)
from .tasks import TaskGraph


def build_configuration(config: AppConfig) -> BuildConfiguration:
    """Build Configuration for a one-shot build."""
    return BuildConfiguration(
        recipe=config.generator.recipe,
        theme=config.generator.theme,
        update_packages=config.generator.update_packages,
    )


def create_site_workflow(config: AppConfig) -> TaskGraph:
    """
    Create the task graph for building and deploying the blog.

    This is a FACTORY function: actions are bound to the config here,
    nothing runs until a runner executes a target.

    Args:
        config: Loaded application config

    Returns:
        TaskGraph with every target registered
    """
    paths = config.paths
    generator = config.generator
    build_config = build_configuration(config)

    graph = TaskGraph(
        name="site",
        description=f"Build {paths.input_dir} into {paths.output_dir}",
        default_target=DEFAULT_TARGET,
    )

    graph.register(
        TARGET_CLEAN,
        action=lambda: clean_output(paths.output_dir),
        description="Empty the output directory",
    )

    graph.register(
        TARGET_BUILD,
        depends_on=[TARGET_CLEAN],
        action=lambda: run_generator(generator.executable, build_config, paths.input_dir, paths.output_dir),
        description=f"Generate the site ({generator.recipe} recipe, {generator.theme} theme)",
    )

    graph.register(
        TARGET_PREVIEW,
        depends_on=[TARGET_CLEAN],
        action=lambda: run_generator(
            generator.executable, build_config.for_preview(), paths.input_dir, paths.output_dir
        ),
        description="Serve the site locally and rebuild on changes",
    )

    graph.register(
        TARGET_DEPLOY,
        action=lambda: deploy_site(paths.output_dir, paths.archive_path, config.deploy.url, config.deploy.token_env),
        description=f"Upload the output to {config.deploy.site or '(site not set)'}",
    )

    graph.register(
        TARGET_DEFAULT,
        depends_on=[TARGET_CLEAN, TARGET_PREVIEW],
        description="Clean, then preview",
    )

    graph.register(
        TARGET_CI,
        depends_on=[TARGET_CLEAN, TARGET_BUILD, TARGET_DEPLOY],
        description="CI build: clean, build, deploy",
    )

    return graph
