import hashlib
import os
import requests

from .cli_logger import logger
from .errors import ChecksumMismatch, ReleaseFetchError

CHUNK_SIZE = 1024 * 256  # 256KB chunks


def compute_checksum(archive_path):
    """Hex SHA-256 of an archive, the value published next to each release."""
    digest = hashlib.sha256()
    with open(archive_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def fetch_checksum(url, timeout=60):
    """Stream url and hash it on the fly; nothing is written to disk."""
    digest = hashlib.sha256()
    filename = os.path.basename(url)
    try:
        with requests.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            total_size = int(r.headers.get("content-length", 0))
            chunks = logger.progress(
                r.iter_content(chunk_size=CHUNK_SIZE),
                description=f"Downloading {filename}",
                total=total_size,
            )
            for chunk in chunks:
                if chunk:  # keep-alive chunks may be empty
                    digest.update(chunk)
    except requests.exceptions.RequestException as e:
        raise ReleaseFetchError(f"Error downloading {url}: {e}") from e
    return digest.hexdigest()


def verify_release(artifact, timeout=60):
    """Download a remote artifact and check it against its pinned checksum.

    Raises ChecksumMismatch on any difference; returns the digest otherwise.
    """
    logger.info(f"Verifying {artifact.name} release archive {artifact.url}")
    actual = fetch_checksum(artifact.url, timeout=timeout)
    if actual.lower() != artifact.checksum.lower():
        raise ChecksumMismatch(artifact.url, artifact.checksum, actual)
    logger.success(f"Checksum verified: {actual}")
    return actual
