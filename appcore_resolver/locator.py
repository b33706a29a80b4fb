import os

from .artifacts import BUNDLE_NAME
from .cli_logger import logger
from .errors import InvalidDescriptorPath

DESCRIPTOR_FILE = "Package.swift"
# Where `make` in go/appcore drops the gomobile bundle, relative to the descriptor.
LOCAL_BUILD_DIR = os.path.join("go", "appcore", "build")
MARKER_FILE = "Info.plist"


def descriptor_dir(descriptor_path):
    """Return the directory holding the descriptor, without the descriptor filename."""
    descriptor_path = os.path.abspath(descriptor_path)
    if os.path.basename(descriptor_path) != DESCRIPTOR_FILE:
        raise InvalidDescriptorPath(descriptor_path, DESCRIPTOR_FILE)
    return os.path.dirname(descriptor_path)


def local_bundle_path(descriptor_path):
    return os.path.join(descriptor_dir(descriptor_path), LOCAL_BUILD_DIR, BUNDLE_NAME)


def local_bundle_marker(descriptor_path):
    """
    Path of the file whose existence marks a locally built bundle.
    Only used as an existence proxy; it is never opened.
    """
    return os.path.join(local_bundle_path(descriptor_path), MARKER_FILE)


def local_bundle_present(marker_path):
    if not os.path.exists(marker_path):
        return False
    logger.notice(f"Using Local Appcore Build From: {marker_path}")
    return True
