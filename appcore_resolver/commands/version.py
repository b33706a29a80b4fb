import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of appcore-resolver."""
    try:
        ver = importlib.metadata.version("appcore-resolver")
        logger.info(f"appcore-resolver version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of appcore-resolver. Is it installed correctly?")
