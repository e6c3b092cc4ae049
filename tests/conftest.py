"""Root conftest: shared test configuration."""

import os

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("OPENAI_API_KEY", "sk-test-fake-key")
