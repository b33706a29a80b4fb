from dataclasses import dataclass

# Only safe on local builds: the release channel rejects unsafeFlags on public modules.
STRICT_FLAGS = (
    "-Werror=return-type",
    "-Werror=unused-variable",
    "-Werror",
)


@dataclass(frozen=True)
class DiagnosticsPolicy:
    flags: tuple = ()

    def __bool__(self):
        return bool(self.flags)

    def __iter__(self):
        return iter(self.flags)


STRICT_POLICY = DiagnosticsPolicy(STRICT_FLAGS)
EMPTY_POLICY = DiagnosticsPolicy()


@dataclass(frozen=True)
class Resolution:
    """The selected artifact and the diagnostics policy that goes with it.

    The policy is not stored: it is derived from whether the artifact is a
    local build, so the pair cannot be built inconsistently.
    """
    artifact: object

    @property
    def source(self):
        return self.artifact.source

    @property
    def diagnostics(self):
        return bind_diagnostics(self.source == "local")


def select_source(local_present, remote, local):
    """A local build always wins over the pinned release, bypassing checksum verification."""
    return local if local_present else remote


def bind_diagnostics(local_selected):
    return STRICT_POLICY if local_selected else EMPTY_POLICY


def resolve(local_present, remote, local):
    """
    Pick the artifact, and with it the diagnostics policy, from one presence signal.

    A remote (distributed) build can never carry the strict flags.
    """
    return Resolution(artifact=select_source(bool(local_present), remote, local))
