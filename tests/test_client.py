"""Unit tests for the Fortem API client."""

from typing import List, Optional

import pytest
import respx
from httpx import Response

from api import FortemClient, TxResponse
from exceptions import ApiError, AuthenticationError
from conftest import envelope


class FakeSession:
    """Session double that hands out tok1, then tok2 after a refresh."""

    def __init__(self) -> None:
        self.access_token: Optional[str] = None
        self.init_calls = 0
        self.refresh_calls: List[Optional[str]] = []

    async def ensure_init(self) -> None:
        self.init_calls += 1
        if self.access_token is None:
            self.access_token = "tok1"

    async def refresh(self, rejected_token: Optional[str] = None) -> None:
        self.refresh_calls.append(rejected_token)
        self.access_token = "tok2"


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(api_url: str, session: FakeSession) -> FortemClient:
    return FortemClient(api_url, session=session)


@pytest.mark.asyncio
@respx.mock
async def test_unwraps_envelope_and_sends_bearer(client: FortemClient, api_url: str, session: FakeSession) -> None:
    """Test that data is unwrapped and the token is attached."""
    route = respx.get(f"{api_url}/api/v1/users/me").mock(
        return_value=Response(200, json=envelope({"nickname": "alice"}))
    )

    result = await client.get("/api/v1/users/me")

    assert result == {"nickname": "alice"}
    assert session.init_calls == 1
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer tok1"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
@respx.mock
async def test_response_model_validation(client: FortemClient, api_url: str) -> None:
    """Test validating data into a pydantic model."""
    respx.post(f"{api_url}/api/v1/items/mint/prepare").mock(
        return_value=Response(200, json=envelope({"txId": "tx-1", "txBytes": "AAEC", "gasBudget": 5000}))
    )

    prepared = await client.post("/api/v1/items/mint/prepare", {"name": "x"}, response_model=TxResponse)

    assert prepared.tx_id == "tx-1"
    assert prepared.tx_bytes == "AAEC"
    assert prepared.gas_budget == 5000


@pytest.mark.asyncio
@respx.mock
async def test_401_refreshes_and_retries_once(client: FortemClient, api_url: str, session: FakeSession) -> None:
    """Test that a 401 triggers one refresh and one identical retry."""
    route = respx.post(f"{api_url}/api/v1/collections/create/prepare").mock(
        side_effect=[
            Response(401, text="expired"),
            Response(200, json=envelope({"ok": True})),
        ]
    )

    result = await client.post("/api/v1/collections/create/prepare", {"name": "c"})

    assert result == {"ok": True}
    assert session.refresh_calls == ["tok1"]
    assert session.init_calls == 1
    assert route.call_count == 2
    first, second = route.calls[0].request, route.calls[1].request
    assert first.headers["Authorization"] == "Bearer tok1"
    assert second.headers["Authorization"] == "Bearer tok2"
    assert first.content == second.content


@pytest.mark.asyncio
@respx.mock
async def test_second_401_is_fatal(client: FortemClient, api_url: str, session: FakeSession) -> None:
    """Test that a 401 after re-authentication is not retried again."""
    route = respx.get(f"{api_url}/api/v1/users/me").mock(return_value=Response(401, text="nope"))

    with pytest.raises(AuthenticationError) as exc_info:
        await client.get("/api/v1/users/me")

    assert exc_info.value.status_code == 401
    assert route.call_count == 2
    assert session.refresh_calls == ["tok1"]


@pytest.mark.asyncio
@respx.mock
async def test_other_errors_are_not_retried(client: FortemClient, api_url: str, session: FakeSession) -> None:
    """Test that non-401 failures raise ApiError with status and body."""
    route = respx.get(f"{api_url}/api/v1/items/9").mock(return_value=Response(500, text="boom"))

    with pytest.raises(ApiError) as exc_info:
        await client.get("/api/v1/items/9")

    assert exc_info.value.status_code == 500
    assert exc_info.value.body == "boom"
    assert "Fortem API Error 500: boom" in str(exc_info.value)
    assert route.call_count == 1
    assert session.refresh_calls == []


@pytest.mark.asyncio
@respx.mock
async def test_unauthenticated_calls_skip_session_hooks(client: FortemClient, api_url: str, session: FakeSession) -> None:
    """Test that login calls neither trigger login nor refresh."""
    respx.post(f"{api_url}/api/v1/auth/nonce").mock(return_value=Response(401, text="denied"))

    with pytest.raises(ApiError) as exc_info:
        await client.post("/api/v1/auth/nonce", {"walletAddress": "0x1"}, authenticated=False)

    assert not isinstance(exc_info.value, AuthenticationError)
    assert session.init_calls == 0
    assert session.refresh_calls == []


@pytest.mark.asyncio
@respx.mock
async def test_upload_is_multipart_and_replayed_on_retry(client: FortemClient, api_url: str) -> None:
    """Test that uploads use multipart and the buffered body survives a retry."""
    route = respx.put(f"{api_url}/api/v1/items/image-upload").mock(
        side_effect=[
            Response(401),
            Response(200, json=envelope({"itemImage": "bafycid"})),
        ]
    )

    result = await client.upload_file("/api/v1/items/image-upload", ("cat.png", b"\x89PNGdata", "image/png"))

    assert result == {"itemImage": "bafycid"}
    for call in route.calls:
        request = call.request
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b"\x89PNGdata" in request.content
        assert b'filename="cat.png"' in request.content


@pytest.mark.asyncio
@respx.mock
async def test_client_without_session(api_url: str) -> None:
    """Test that a client with no session sends no Authorization header."""
    route = respx.post(f"{api_url}/api/v1/auth/check-wallet").mock(
        return_value=Response(200, json=envelope({"exists": True}))
    )

    await FortemClient(api_url).post("/api/v1/auth/check-wallet", {"walletAddress": "0x1"})

    assert "Authorization" not in route.calls.last.request.headers
