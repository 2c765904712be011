"""
Account and developer tools
"""

from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from api.client import FortemClient
from api.models import ApiKeyResponse, CheckWalletResponse
from auth.session import SessionInitializer
from signer import Signer
from .guides import build_guide
from .transactions import to_text

API_KEY_PATH = "/api/v1/users/settings/developers/api-key"


def register_developer_tools(
    mcp: FastMCP,
    client: FortemClient,
    signer: Signer,
    session: SessionInitializer,
) -> None:

    @mcp.tool(
        name="get_wallet_address",
        description="Returns the Sui wallet address this server is authenticated as. Logs in first if needed.",
    )
    async def get_wallet_address() -> str:
        await session.ensure_init()
        return to_text({"walletAddress": signer.get_address()})

    @mcp.tool(
        name="get_developer_guide",
        description=(
            "Get a guide for integrating Fortem into your game or app, with your actual API key "
            "in the code examples. Choose Direct API (1), JS SDK for HTML/web games (2) or Unity SDK (3)."
        ),
    )
    async def get_developer_guide(
        option: Annotated[
            Optional[Literal["1", "2", "3"]],
            Field(description="1=Direct Developer API, 2=JS SDK, 3=Unity SDK. Omit for an overview of all options."),
        ] = None,
    ) -> str:
        result = await client.get(API_KEY_PATH, response_model=ApiKeyResponse)
        return build_guide(result.api_key, option)

    @mcp.tool(
        name="get_my_api_key",
        description="Get your Fortem Developer API key. Pass regenerate=true to issue a new key (the old key is invalidated).",
    )
    async def get_my_api_key(
        regenerate: Annotated[bool, Field(description="Generate a new API key, invalidating the current one")] = False,
    ) -> str:
        if regenerate:
            result = await client.put(API_KEY_PATH, {}, response_model=ApiKeyResponse)
            note = "A new API key has been issued. Update your SDK configuration with this key."
        else:
            result = await client.get(API_KEY_PATH, response_model=ApiKeyResponse)
            note = "Use this key in createFortemClient({ apiKey }) or as Authorization: Bearer <key>."
        return to_text({"apiKey": result.api_key, "regenerated": regenerate, "note": note})

    @mcp.tool(
        name="verify_member",
        description="Check whether a Sui wallet address is a registered Fortem member.",
    )
    async def verify_member(
        wallet_address: Annotated[str, Field(description="Sui wallet address to verify (starts with 0x)")],
    ) -> str:
        result = await client.post(
            "/api/v1/auth/check-wallet",
            {"walletAddress": wallet_address},
            response_model=CheckWalletResponse,
        )
        if result.exists:
            message = "This address is a registered Fortem member."
        else:
            message = "This address is not registered on Fortem. Direct them to https://fortem.gg to sign up."
        return to_text({
            "walletAddress": result.wallet_address or wallet_address,
            "isMember": result.exists,
            "message": message,
        })

    @mcp.tool(
        name="get_my_profile",
        description="Get your Fortem account profile: wallet address, nickname and account info.",
    )
    async def get_my_profile() -> str:
        return to_text(await client.get("/api/v1/users/me"))
