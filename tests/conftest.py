"""Test environment: in-memory SQLite and cheap bcrypt before any app module loads settings."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-testing-only-0123456789")
os.environ.setdefault("LOG_LEVEL", "WARNING")
