import click
from .cli_logger import logger
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the package root holding Package.swift.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
@click.pass_context
def cli(ctx, path, verbose):
    """Resolve the Appcore binary for the CriticalMoments package.

    Data (graphs, checksums, config values) is written to stdout; log lines go to stderr.
    """
    logger.verbose = verbose
    ctx.obj = {"path": path}

cli.add_command(resolve)
cli.add_command(dump_package)
cli.add_command(compute_checksum)
cli.add_command(verify_release)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
