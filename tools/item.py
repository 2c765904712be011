"""
Item tools: image upload, minting and inventory
"""

import logging
from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from api.client import FortemClient
from signer import Signer
from .transactions import prepare_sign_execute, to_text

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}

# Item images go to IPFS, collection images to S3
UPLOAD_ENDPOINTS = {
    "item": "/api/v1/items/image-upload",
    "collection_logo": "/api/v1/collections/image-upload/logo",
    "collection_background": "/api/v1/collections/image-upload/background",
}

ItemStatus = Literal["PROCESSING", "MINTED", "REDEEMED", "OFFER_PENDING", "KIOSK_LISTED"]


class ItemAttribute(BaseModel):
    name: str
    value: str


def get_mime_type(filename: str) -> str:
    return MIME_TYPES.get(Path(filename).suffix.lower(), "application/octet-stream")


def register_item_tools(mcp: FastMCP, client: FortemClient, signer: Signer) -> None:

    @mcp.tool(
        name="upload_image",
        description="Uploads a local image file to Fortem. Item images are stored on IPFS; collection images are stored on S3.",
    )
    async def upload_image(
        file_path: Annotated[str, Field(description="Absolute path to the local file to upload (e.g. /Users/me/image.png)")],
        type: Annotated[
            Literal["item", "collection_logo", "collection_background"],
            Field(description="Image type: item (NFT image), collection_logo or collection_background"),
        ],
    ) -> str:
        path = Path(file_path)
        content = path.read_bytes()
        logger.debug(f"Uploading {path.name} ({len(content)} bytes) as {type}")

        result = await client.upload_file(UPLOAD_ENDPOINTS[type], (path.name, content, get_mime_type(path.name)))

        if type == "item":
            return to_text({
                "type": "item",
                "ipfsCid": result["itemImage"],
                "note": "Use this CID as item_image in mint_item",
            })

        field_name = "logo_image_path" if type == "collection_logo" else "background_image_path"
        return to_text({
            "type": type,
            "s3Key": result,
            "note": f"Use this value as {field_name} in create_collection",
        })

    @mcp.tool(
        name="mint_item",
        description="Mints an NFT item into your collection. Automatically signs and executes the blockchain transaction.",
    )
    async def mint_item(
        collection_id: Annotated[int, Field(description="Collection ID to add the item to", gt=0)],
        name: Annotated[str, Field(description="Item name (max 40 characters)", max_length=40)],
        description: Annotated[str, Field(description="Item description (max 1000 characters)", max_length=1000)],
        quantity: Annotated[int, Field(description="Quantity to mint", gt=0)],
        redeem_code: Annotated[str, Field(description="Redeem code without spaces", pattern=r"^\S+$")],
        redeem_url: Annotated[Optional[str], Field(description="Redeem URL (max 200 characters)", max_length=200)] = None,
        item_image: Annotated[Optional[str], Field(description="IPFS CID returned by upload_image")] = None,
        attributes: Annotated[Optional[List[ItemAttribute]], Field(description="NFT attributes, e.g. [{name: 'Level', value: '1'}]")] = None,
    ) -> str:
        body: Dict[str, object] = {
            "collectionId": collection_id,
            "name": name,
            "description": description,
            "quantity": quantity,
            "redeemCode": redeem_code,
        }
        if redeem_url is not None:
            body["redeemUrl"] = redeem_url
        if item_image is not None:
            body["itemImage"] = item_image
        if attributes is not None:
            body["attributes"] = [attribute.model_dump() for attribute in attributes]

        result = await prepare_sign_execute(
            client, signer,
            "/api/v1/items/mint/prepare",
            "/api/v1/items/mint/execute",
            body,
        )
        return to_text({
            "success": True,
            "itemId": result.get("itemId"),
            "objectId": result.get("objectId"),
            "name": result.get("name"),
            "collectionId": result.get("collectionId"),
            "nftNumber": result.get("nftNumber"),
            "quantity": result.get("quantity"),
            "redeemCode": result.get("redeemCode"),
        })

    @mcp.tool(
        name="get_my_items",
        description="Retrieves your own NFT item inventory, filtered to your items.",
    )
    async def get_my_items(
        status: Annotated[Optional[ItemStatus], Field(description="Item status filter")] = None,
        collection_ids: Annotated[Optional[List[int]], Field(description="Filter by collection IDs")] = None,
        query: Annotated[Optional[str], Field(description="Search query for item name")] = None,
        skip: Annotated[int, Field(description="Pagination offset", ge=0)] = 0,
        take: Annotated[int, Field(description="Number of results to fetch (max 100)", ge=1, le=100)] = 10,
    ) -> str:
        params: Dict[str, object] = {"skip": skip, "take": take}
        if query:
            params["query"] = query
        if status:
            params["status"] = status
        if collection_ids:
            params["collectionIds"] = ",".join(str(cid) for cid in collection_ids)
        return to_text(await client.get("/api/v1/items", params=params))

    @mcp.tool(
        name="get_item_detail",
        description="Retrieves detailed information for a specific NFT item, including price, attributes and on-chain objectId.",
    )
    async def get_item_detail(
        item_id: Annotated[int, Field(description="Item ID", gt=0)],
    ) -> str:
        return to_text(await client.get(f"/api/v1/items/{item_id}"))
