# tests/conftest.py
from __future__ import annotations

import os
import tempfile

import pytest

# Must be set before fruitshop.config is imported anywhere.
_DB_DIR = tempfile.mkdtemp(prefix="fruitshop-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["SKILL_ID"] = ""

from skill_helpers import TODAY, SkillTester  # noqa: E402


@pytest.fixture
def tester() -> SkillTester:
    return SkillTester(today=TODAY)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from fruitshop.main import app, get_today

    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
