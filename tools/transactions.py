"""Shared prepare -> sign -> execute sequence for on-chain tools"""

import json
import logging
from typing import Any, Dict

from api.client import FortemClient
from api.models import TxResponse
from signer import Signer

logger = logging.getLogger(__name__)


async def prepare_sign_execute(
    client: FortemClient,
    signer: Signer,
    prepare_path: str,
    execute_path: str,
    body: Dict[str, Any],
) -> Any:
    """
    Have the backend build a transaction, sign it locally, and submit it.

    The prepared transaction bytes are signed exactly as received.

    Returns:
        The execute endpoint's ``data``
    """
    prepared = await client.post(prepare_path, body, response_model=TxResponse)
    logger.debug(f"Prepared transaction {prepared.tx_id} via {prepare_path}")

    signature = await signer.sign_transaction(prepared.tx_bytes)

    return await client.post(
        execute_path,
        {"txId": prepared.tx_id, "txBytes": prepared.tx_bytes, "signature": signature},
    )


def to_text(data: Any) -> str:
    """Render a tool result as indented JSON"""
    return json.dumps(data, indent=2, ensure_ascii=False)
