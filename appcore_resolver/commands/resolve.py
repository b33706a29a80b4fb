import click
from ..builder import resolve_project
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.pass_context
@handle_exceptions
def resolve(ctx):
    """Show which Appcore binary this package links against."""
    resolution, _ = resolve_project(ctx.obj["path"])
    artifact = resolution.artifact

    logger.info(f"Appcore source: {resolution.source}")
    logger.step_info(f"location: {artifact.location()}", indent=2)
    if resolution.source == "remote":
        logger.step_info(f"checksum: {artifact.checksum}", indent=2)
    if resolution.diagnostics:
        logger.step_info(f"diagnostics: {' '.join(resolution.diagnostics)}", indent=2)
    else:
        logger.step_info("diagnostics: none", indent=2)
