import click
from ..builder import resolve_project
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..manifest import render_json, render_swift

@click.command("dump-package")
@click.option("--format", "output_format", type=click.Choice(["json", "swift"]), default="json",
              help="Output format of the resolved package graph.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), default=None,
              help="Write to this file instead of stdout.")
@click.pass_context
@handle_exceptions
def dump_package(ctx, output_format, output):
    """Print the resolved package graph."""
    path = ctx.obj["path"]
    _, graph = resolve_project(path)
    if output_format == "swift":
        text = render_swift(graph, package_root=path)
    else:
        text = render_json(graph)

    if output is None:
        click.echo(text, nl=False)
        return
    with open(output, "w") as f:
        f.write(text)
    logger.success(f"Wrote {output_format} package graph to {output}")
