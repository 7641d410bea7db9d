import sys
from pathlib import Path
from typing import Dict

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import httpx
import pytest

SAMPLE_TEXT = "See [docs](https://example.com/ok) and [broken](https://example.com/404)"


@pytest.fixture()
def status_transport():
    """Build a MockTransport answering with a fixed status per URL.

    Unknown URLs raise ``httpx.ConnectError`` to mimic an unreachable host.
    """

    def factory(statuses: Dict[str, int]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            if url not in statuses:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(statuses[url])

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture()
def sample_markdown(tmp_path: Path) -> Path:
    path = tmp_path / "README.md"
    path.write_text(f"# Project\n\n{SAMPLE_TEXT}\n", encoding="utf-8")
    return path
