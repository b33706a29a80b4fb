import os
import tempfile

# Keep test runs out of ~/.appcore_resolver; set before the logger is imported.
os.environ.setdefault("APPCORE_RESOLVER_LOG_DIR", os.path.join(tempfile.mkdtemp(), "logs"))
