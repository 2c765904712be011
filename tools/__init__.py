"""
MCP tool registrations
"""
from fastmcp import FastMCP

from runtime import Runtime
from .collection import register_collection_tools
from .developer import register_developer_tools
from .item import register_item_tools
from .market import register_market_tools
from .transactions import prepare_sign_execute, to_text

TOOL_NAMES = [
    "get_wallet_address", "verify_member", "get_my_profile", "get_my_api_key", "get_developer_guide",
    "upload_image", "create_collection", "get_my_collections", "get_collection_detail",
    "mint_item", "get_my_items", "get_item_detail", "ensure_kiosk", "list_item",
]


def register_tools(mcp: FastMCP, runtime: Runtime) -> None:
    """Register every tool against the runtime's client and lazy signer"""
    register_collection_tools(mcp, runtime.client, runtime.signer)
    register_item_tools(mcp, runtime.client, runtime.signer)
    register_market_tools(mcp, runtime.client, runtime.signer)
    register_developer_tools(mcp, runtime.client, runtime.signer, runtime.session)


__all__ = [
    "TOOL_NAMES",
    "register_tools",
    "prepare_sign_execute",
    "to_text",
]
