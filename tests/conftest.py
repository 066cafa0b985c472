from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from lark_nodes.core.sdk import LarkSDK
from lark_nodes.schema.models import LarkAppCredentials

APP_TOKEN = "bascnAPP"
TABLE_ID = "tblTABLE"
RECORDS_PATH = f"/open-apis/bitable/v1/apps/{APP_TOKEN}/tables/{TABLE_ID}/records"
TOKEN_PATH = "/open-apis/auth/v3/tenant_access_token/internal"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeLark:
    """Records every request and answers from a (method, path) route table."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.clients: List[httpx.Client] = []
        self._routes: Dict[Tuple[str, str], Route] = {}

    def add(
            self,
            method: str,
            path: str,
            payload: Optional[Dict[str, Any]] = None,
            status: int = 200,
            text: Optional[str] = None,
    ) -> None:
        if text is not None:
            self._routes[(method, path)] = httpx.Response(status, text=text)
        else:
            self._routes[(method, path)] = httpx.Response(status, json=payload)

    def fail(self, method: str, path: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._routes[(method, path)] = _raise

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"code": 404, "msg": "no route"})
        if callable(route):
            return route(request)
        return route

    def client(self) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(self._handle))
        self.clients.append(client)
        return client


@pytest.fixture
def fake_lark() -> FakeLark:
    return FakeLark()


@pytest.fixture
def sdk(fake_lark: FakeLark) -> LarkSDK:
    return LarkSDK(client=fake_lark.client())


@pytest.fixture
def credentials() -> LarkAppCredentials:
    return LarkAppCredentials(
        app_id="cli_test",
        app_secret="secret",
        app_token=APP_TOKEN,
        table_id=TABLE_ID,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LARK_NODES_CONFIG_DIR", str(tmp_path / "config"))
    for name in ("LARK_APP_ID", "LARK_APP_SECRET", "LARK_APP_TOKEN", "LARK_TABLE_ID", "LARK_TENANT_ACCESS_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "config"
