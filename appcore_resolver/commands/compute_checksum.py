import click
from ..checksum import compute_checksum as sha256_of
from ..decorators import handle_exceptions

@click.command("compute-checksum")
@click.argument("archive", type=click.Path(exists=True, dir_okay=False))
@handle_exceptions
def compute_checksum(archive):
    """Print the SHA-256 checksum of a release ARCHIVE."""
    click.echo(sha256_of(archive))
