import re
from dataclasses import dataclass
from packaging.version import Version, InvalidVersion

from .errors import InvalidReleasePin

BINARY_NAME = "Appcore"
BUNDLE_NAME = f"{BINARY_NAME}.xcframework"
RELEASE_URL_TEMPLATE = (
    "https://github.com/CriticalMoments/CriticalMoments/releases/download/"
    "appcore-v{version}/" + BUNDLE_NAME + ".zip"
)

# Production release binary, built and checksummed by CI on the GitHub release action.
DEFAULT_RELEASE_VERSION = "0.8.0-beta"
DEFAULT_RELEASE_CHECKSUM = "45ee96b2143ef9fe38d1bc47f5b8464f7fed5a9371b5a5b59b51dec39a059b4f"

_CHECKSUM_RE = re.compile(r"^[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class RemoteArtifact:
    """A checksum-pinned release archive, fetched and verified by the consumer's build tool."""
    name: str
    url: str
    checksum: str

    source = "remote"

    def location(self):
        return self.url


@dataclass(frozen=True)
class LocalArtifact:
    """A bundle built on this machine. Trusted as-is, never checksummed."""
    name: str
    path: str

    source = "local"

    def location(self):
        return self.path


@dataclass(frozen=True)
class ReleasePin:
    version: str = DEFAULT_RELEASE_VERSION
    checksum: str = DEFAULT_RELEASE_CHECKSUM

    def __post_init__(self):
        try:
            Version(self.version)
        except InvalidVersion:
            raise InvalidReleasePin(f"Release version '{self.version}' is not a valid version")
        if not _CHECKSUM_RE.match(self.checksum):
            raise InvalidReleasePin(
                f"Release checksum '{self.checksum}' is not a hex-encoded SHA-256 digest"
            )

    @property
    def url(self):
        return RELEASE_URL_TEMPLATE.format(version=self.version)

    def artifact(self, name=BINARY_NAME):
        return RemoteArtifact(name=name, url=self.url, checksum=self.checksum.lower())


def release_pin_from_config(conf):
    """Build the release pin from the [release] table, falling back to the pinned defaults."""
    release = conf.get("release", {})
    if not isinstance(release, dict):
        raise InvalidReleasePin("[release] must be a table")
    return ReleasePin(
        version=str(release.get("version", DEFAULT_RELEASE_VERSION)),
        checksum=str(release.get("checksum", DEFAULT_RELEASE_CHECKSUM)),
    )
