"""Shared pytest configuration.

DATABASE_URL must be set before src.infrastructure.database is imported,
because the module builds its engine at import time.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
