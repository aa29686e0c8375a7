from importlib import metadata as _metadata

try:
    _VERSION = _metadata.version("craftblocks")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    _VERSION = "0.0.0"

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"craftblocks-py/{_VERSION}"
