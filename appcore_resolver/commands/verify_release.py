import sys
import click
from ..builder import resolve_project
from ..checksum import verify_release as verify
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command("verify-release")
@click.option("--timeout", default=60, show_default=True, help="Network timeout in seconds.")
@click.pass_context
@handle_exceptions
def verify_release(ctx, timeout):
    """Download the pinned Appcore release and check it against its checksum."""
    resolution, _ = resolve_project(ctx.obj["path"])
    if resolution.source != "remote":
        logger.error("A local Appcore build is in use; there is no release archive to verify.")
        logger.info("Remove go/appcore/build to fall back to the pinned release.")
        sys.exit(1)
    verify(resolution.artifact, timeout=timeout)
