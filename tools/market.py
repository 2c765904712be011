"""
Kiosk and listing tools
"""

from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from api.client import FortemClient
from api.models import KioskExistsResponse
from signer import Signer
from .transactions import prepare_sign_execute, to_text


def register_market_tools(mcp: FastMCP, client: FortemClient, signer: Signer) -> None:

    async def kiosk_exists() -> bool:
        return (await client.get("/api/v1/kiosks/exists", response_model=KioskExistsResponse)).exists

    @mcp.tool(
        name="ensure_kiosk",
        description="Creates a kiosk if one does not exist and skips creation otherwise. A kiosk is required to list items for sale.",
    )
    async def ensure_kiosk() -> str:
        if await kiosk_exists():
            return to_text({
                "exists": True,
                "created": False,
                "message": "Kiosk already exists, skipped creation",
            })

        # Sponsored transaction: the server adds its own gas signature
        result = await prepare_sign_execute(
            client, signer,
            "/api/v1/kiosks/create/prepare",
            "/api/v1/kiosks/create/execute",
            {},
        )
        return to_text({
            "exists": False,
            "created": True,
            "kioskId": result.get("kioskId"),
            "objectId": result.get("objectId"),
            "message": "Kiosk created successfully",
        })

    @mcp.tool(
        name="list_item",
        description="Lists an NFT item for sale in your kiosk. Run ensure_kiosk first if you don't have a kiosk yet.",
    )
    async def list_item(
        item_id: Annotated[int, Field(description="ID of the item to list for sale", gt=0)],
        selling_price: Annotated[float, Field(description="Selling price (0 with enable_trading=true for a trade-only listing)", ge=0)],
        enable_trading: Annotated[bool, Field(description="Whether to allow item swapping (trade)")],
        selling_token_symbol: Annotated[Literal["SUI", "USDC", "USDT"], Field(description="Payment token (default: USDC)")] = "USDC",
    ) -> str:
        if not await kiosk_exists():
            return to_text({
                "success": False,
                "error": "Kiosk does not exist. Please run ensure_kiosk first.",
            })

        result = await prepare_sign_execute(
            client, signer,
            f"/api/v1/items/{item_id}/list/prepare",
            "/api/v1/items/list/execute",
            {
                "sellingPrice": selling_price,
                "sellingTokenSymbol": selling_token_symbol,
                "enableTrading": enable_trading,
            },
        )
        return to_text({
            "success": True,
            "itemId": result.get("itemId"),
            "kioskItemId": result.get("kioskItemId"),
            "sellingPrice": result.get("sellingPrice"),
            "sellingTokenSymbol": result.get("sellingTokenSymbol"),
            "enableTrading": result.get("enableTrading"),
            "listedAt": result.get("listedAt"),
        })
