import click
import os
import json
from .. import config as config_module
from ..artifacts import release_pin_from_config
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..errors import ConfigKeyError

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the appcore.toml release pin."""
    pass

@config.command()
@click.pass_context
@handle_exceptions
def view(ctx):
    """Print the effective release pin and the appcore.toml it came from."""
    conf = config_module.load_config(path=ctx.obj["path"])
    pin = release_pin_from_config(conf)
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not conf:
        logger.info(f"No {config_module.CONFIG_FILE} at {config_file_path}; using the pinned release.")
    click.echo(json.dumps({"version": pin.version, "url": pin.url, "checksum": pin.checksum}, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
@handle_exceptions
def get(ctx, key):
    """Get a value from the appcore.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    value = conf
    try:
        for k in key.split('.'):
            value = value[k]
    except (KeyError, TypeError):
        raise ConfigKeyError(f"Key '{key}' not found in {config_module.CONFIG_FILE}")
    click.echo(value)

@config.command()
@click.argument('key')
@click.argument('value')
@click.pass_context
@handle_exceptions
def set(ctx, key, value):
    """Set a value in the appcore.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    for i, k in enumerate(keys[:-1]):
        d = d.setdefault(k, {})
        if not isinstance(d, dict):
            parent = '.'.join(keys[:i + 1])
            raise ConfigKeyError(f"Cannot set '{key}': '{parent}' is not a table in {config_module.CONFIG_FILE}")
    d[keys[-1]] = value

    # Refuse to write a pin that resolution would reject.
    release_pin_from_config(conf)
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")
