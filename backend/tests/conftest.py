"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or a real treasury owner
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("OWNER_ADDRESS", "0x" + "1" * 40)
