import os

from . import config
from .artifacts import BINARY_NAME, LocalArtifact, ReleasePin, release_pin_from_config
from .locator import DESCRIPTOR_FILE, local_bundle_marker, local_bundle_path, local_bundle_present
from .package import assemble_graph
from .selector import resolve


def resolve_package(package_root=".", release=None):
    """
    Resolve the Appcore binary for the package at package_root and assemble its build graph.

    Returns a (Resolution, BuildGraph) pair. The only input that can vary
    between runs is whether the local bundle marker exists.
    """
    if release is None:
        release = ReleasePin()
    descriptor_path = os.path.join(os.path.abspath(package_root), DESCRIPTOR_FILE)

    remote = release.artifact(BINARY_NAME)
    local = LocalArtifact(name=BINARY_NAME, path=local_bundle_path(descriptor_path))

    resolution = resolve(local_bundle_present(local_bundle_marker(descriptor_path)), remote, local)
    graph = assemble_graph(resolution)
    return resolution, graph


def resolve_project(path="."):
    """resolve_package with the release pin taken from the project's appcore.toml, if any."""
    conf = config.load_config(path)
    return resolve_package(path, release_pin_from_config(conf))
