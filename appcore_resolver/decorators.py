import functools
import click
import sys
from .cli_logger import logger
from .errors import ChecksumMismatch, ResolverError

def handle_exceptions(func):
    """A decorator to log failures of CLI commands and turn them into exit status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
        except ChecksumMismatch as e:
            logger.error(str(e))
            logger.error("Do not use this archive. Re-check the pinned checksum against the release build logs.")
        except ResolverError as e:
            logger.error(f"Error: {e}")
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info())
        except (click.ClickException, click.exceptions.Exit):
            raise
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
        sys.exit(1)
    return wrapper
