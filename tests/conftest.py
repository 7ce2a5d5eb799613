from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.shared.client_fakes import StaticSession  # noqa: E402


@pytest.fixture
def session() -> StaticSession:
    return StaticSession()


@pytest.fixture
def keyed_session() -> StaticSession:
    return StaticSession(api_key="secret-key")
