import os

# The demo server reads its config at import time.
os.environ.setdefault("CRAFT_BASE_URL", "https://craft.test/api/v1")
os.environ.setdefault("CONFIG_FILE_PATH", "tests/does-not-exist.yaml")
