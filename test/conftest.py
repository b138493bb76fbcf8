from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env first, then fall back to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# Every test runs against in-memory SQLite; set before minishop settings are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOGFIRE_ENABLED"] = "false"


@pytest.fixture(autouse=True)
def _reset_auditor():
    """Make sure no test leaks a bound auditor into the next one."""
    from minishop.core.auditing import reset_current_auditor, set_current_auditor

    token = set_current_auditor(None)
    yield
    reset_current_auditor(token)
