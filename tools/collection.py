"""
Collection tools
"""

from typing import Annotated, List, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from api.client import FortemClient
from signer import Signer
from .transactions import prepare_sign_execute, to_text

TokenSymbol = Literal["SUI", "USDC", "USDT"]


def register_collection_tools(mcp: FastMCP, client: FortemClient, signer: Signer) -> None:

    @mcp.tool(
        name="create_collection",
        description="Creates a new NFT collection. Automatically signs and executes the blockchain transaction.",
    )
    async def create_collection(
        name: Annotated[str, Field(description="Collection name (max 40 characters)", max_length=40)],
        description: Annotated[str, Field(description="Collection description (max 1000 characters)", max_length=1000)],
        logo_image_path: Annotated[Optional[str], Field(description="Logo image path (value returned by upload_image)")] = None,
        background_image_path: Annotated[Optional[str], Field(description="Background image path (value returned by upload_image)")] = None,
        token_symbols: Annotated[Optional[List[TokenSymbol]], Field(description="Accepted payment tokens (default: USDC)")] = None,
        is_dna_activated: Annotated[bool, Field(description="Whether to activate the DNA feature")] = False,
        purchase_fee_rate: Annotated[Optional[Literal[5, 10, 15, 20]], Field(description="Purchase fee rate in % (5, 10, 15 or 20)")] = None,
    ) -> str:
        body = {"name": name, "description": description, "isDnaActivated": is_dna_activated}
        if logo_image_path is not None:
            body["logoImagePath"] = logo_image_path
        if background_image_path is not None:
            body["backgroundImagePath"] = background_image_path
        if token_symbols is not None:
            body["tokenSymbols"] = token_symbols
        if purchase_fee_rate is not None:
            body["purchaseFeeRate"] = purchase_fee_rate

        result = await prepare_sign_execute(
            client, signer,
            "/api/v1/collections/create/prepare",
            "/api/v1/collections/create/execute",
            body,
        )
        return to_text({
            "success": True,
            "collectionId": result.get("collectionId"),
            "objectId": result.get("objectId"),
            "name": result.get("name"),
            "description": result.get("description"),
            "tokenSymbols": result.get("tokenSymbols"),
            "isDnaActivated": result.get("isDnaActivated"),
            "purchaseFeeRate": result.get("purchaseFeeRate"),
        })

    @mcp.tool(
        name="get_my_collections",
        description="Retrieves your NFT collection list, filtered to your own collections.",
    )
    async def get_my_collections(
        query: Annotated[Optional[str], Field(description="Search query for collection name")] = None,
        skip: Annotated[int, Field(description="Pagination offset", ge=0)] = 0,
        take: Annotated[int, Field(description="Number of results to fetch (max 100)", ge=1, le=100)] = 10,
    ) -> str:
        params = {"skip": skip, "take": take}
        if query:
            params["query"] = query
        return to_text(await client.get("/api/v1/collections", params=params))

    @mcp.tool(
        name="get_collection_detail",
        description="Retrieves detailed information for a specific collection.",
    )
    async def get_collection_detail(
        collection_id: Annotated[int, Field(description="Collection ID", gt=0)],
    ) -> str:
        return to_text(await client.get(f"/api/v1/collections/{collection_id}/header"))
