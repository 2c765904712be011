"""Tests for the MCP tool layer."""

import json

import pytest
import respx
from fastmcp import Client, FastMCP
from httpx import Response

from api import FortemClient
from signer import Ed25519Signer
from tools import TOOL_NAMES, prepare_sign_execute
from tools.collection import register_collection_tools
from tools.developer import register_developer_tools
from tools.item import register_item_tools
from tools.market import register_market_tools
from auth import SessionInitializer
from conftest import envelope


@pytest.fixture
def signer(keypair) -> Ed25519Signer:
    return Ed25519Signer(keypair)


@pytest.fixture
def mcp(api_url: str, signer: Ed25519Signer) -> FastMCP:
    client = FortemClient(api_url)
    server = FastMCP(name="test")
    register_collection_tools(server, client, signer)
    register_item_tools(server, client, signer)
    register_market_tools(server, client, signer)
    register_developer_tools(server, client, signer, SessionInitializer(None))
    return server


@pytest.mark.asyncio
@respx.mock
async def test_prepare_sign_execute_signs_prepared_bytes(api_url: str, signer: Ed25519Signer) -> None:
    respx.post(f"{api_url}/api/v1/items/mint/prepare").mock(
        return_value=Response(200, json=envelope({"txId": "tx-9", "txBytes": "AAECAw=="}))
    )
    execute_route = respx.post(f"{api_url}/api/v1/items/mint/execute").mock(
        return_value=Response(200, json=envelope({"itemId": 5}))
    )

    result = await prepare_sign_execute(
        FortemClient(api_url), signer,
        "/api/v1/items/mint/prepare", "/api/v1/items/mint/execute",
        {"name": "sword"},
    )

    assert result == {"itemId": 5}
    assert json.loads(execute_route.calls.last.request.content) == {
        "txId": "tx-9",
        "txBytes": "AAECAw==",
        "signature": await signer.sign_transaction("AAECAw=="),
    }


@pytest.mark.asyncio
async def test_all_tools_are_registered(mcp: FastMCP) -> None:
    async with Client(mcp) as client:
        tools = await client.list_tools()

    assert sorted(tool.name for tool in tools) == sorted(TOOL_NAMES)


@pytest.mark.asyncio
@respx.mock
async def test_list_item_requires_kiosk(mcp: FastMCP, api_url: str) -> None:
    respx.get(f"{api_url}/api/v1/kiosks/exists").mock(return_value=Response(200, json=envelope({"exists": False})))

    async with Client(mcp) as client:
        result = await client.call_tool(
            "list_item",
            {"item_id": 3, "selling_price": 10, "enable_trading": False},
        )

    payload = json.loads(result.content[0].text)
    assert payload["success"] is False
    assert "ensure_kiosk" in payload["error"]


@pytest.mark.asyncio
@respx.mock
async def test_developer_guide_embeds_api_key(mcp: FastMCP, api_url: str) -> None:
    key_route = respx.get(f"{api_url}/api/v1/users/settings/developers/api-key").mock(
        return_value=Response(200, json=envelope({"apiKey": "fk_live_123"}))
    )

    async with Client(mcp) as client:
        unity = await client.call_tool("get_developer_guide", {"option": "3"})
        overview = await client.call_tool("get_developer_guide", {})

    unity_text = unity.content[0].text
    assert unity_text.startswith("# Option 3: Unity SDK")
    assert "fk_live_123" in unity_text

    overview_text = overview.content[0].text
    assert overview_text.startswith("# Fortem Developer Integration Guide")
    assert "Your API key: `fk_live_123`" in overview_text
    assert 'createFortemClient({ apiKey: "fk_live_123" })' in overview_text
    assert key_route.call_count == 2
