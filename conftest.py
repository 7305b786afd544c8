"""Global pytest configuration."""

import os

# Настройки читаются при импорте app.core.config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("BLOB_STORE_BACKEND", "memory")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
