"""Sui full node queries needed for zkLogin"""

import logging

import httpx

from exceptions import UpstreamError
from settings import CONNECT_TIMEOUT, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


async def get_current_epoch(rpc_url: str) -> int:
    """Return the chain's current epoch via ``suix_getLatestSuiSystemState``

    Raises:
        UpstreamError: On a non-2xx response or a JSON-RPC error
    """
    request = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "suix_getLatestSuiSystemState",
        "params": [],
    }
    async with httpx.AsyncClient(timeout=httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)) as client:
        response = await client.post(rpc_url, json=request)

    if not response.is_success:
        raise UpstreamError(
            f"Sui RPC error {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    body = response.json()
    if "error" in body:
        raise UpstreamError(
            f"Sui RPC error: {body['error']}",
            status_code=response.status_code,
            body=response.text,
        )

    epoch = int(body["result"]["epoch"])
    logger.debug(f"Current Sui epoch: {epoch}")
    return epoch
