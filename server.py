"""
MCP server construction
"""
import logging

from fastmcp import FastMCP

from runtime import Runtime
from settings import SERVER_NAME, SERVER_VERSION
from tools import TOOL_NAMES, register_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
Fortem marketplace tools acting as one Sui wallet.

Login happens automatically on the first tool call that needs it.
On-chain actions (create_collection, mint_item, ensure_kiosk, list_item) are
prepared by Fortem, signed locally, and executed in one call.
Upload images with upload_image first and pass the returned value on.
"""


def create_server(runtime: Runtime) -> FastMCP:
    """Create the MCP server with all tools registered"""
    mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION, instructions=INSTRUCTIONS.strip())
    register_tools(mcp, runtime)
    logger.info(f"Tools registered: {', '.join(TOOL_NAMES)}")
    return mcp
