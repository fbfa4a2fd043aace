"""Root conftest — shared test configuration."""

import os

# Tests build apps with explicit Settings; keep ambient env predictable
os.environ.setdefault("NODE_ENV", "development")
os.environ.setdefault("LOG_FORMAT", "text")
