"""Root conftest - shared test configuration."""

import os

# Human-readable logs if anything calls setup_logging during tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("MOCK_FAILURE_RATE", "0")
