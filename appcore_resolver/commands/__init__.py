from .compute_checksum import compute_checksum
from .config import config
from .dump_package import dump_package
from .log import log
from .resolve import resolve
from .verify_release import verify_release
from .version import version

__all__ = [
    "compute_checksum",
    "config",
    "dump_package",
    "log",
    "resolve",
    "verify_release",
    "version",
]
