"""Test configuration shared by the whole suite."""

import os

# Must run before anything under src/ is imported: the configuration is
# loaded once, at import time of the runtime context.
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("TEST_LOG_LEVEL", "WARNING")

from tests.fixtures import *  # noqa: E402,F401,F403
