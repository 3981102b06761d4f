from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if _SRC.exists():
    sys.path.insert(0, str(_SRC))

from nursys.adapters.nursys_client import NursysClient  # noqa: E402

TESTDATA = Path(__file__).resolve().parent / "testdata"

Handler = Callable[[httpx.Request], Any]


def load_testdata(name: str) -> bytes:
    return (TESTDATA / name).read_bytes()


def mock_client(handler: Handler, base_url: str = "https://nursys.test/api") -> NursysClient:
    """`NursysClient` sobre un transporte falso; no toca la red."""

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return NursysClient(base_url, "acme", "1234!", http_client=http, close_http_client=True)


@pytest.fixture
def submit_response_json() -> bytes:
    return load_testdata("Generic_SubmitResponseMessage.json")
