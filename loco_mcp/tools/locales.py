from typing import Any
import logging

from loco_mcp.core import loco_client
from loco_mcp.core.errors import LocoApiError
from loco_mcp.core.models import ApiKey
from loco_mcp.utils import format_result

logger = logging.getLogger(__name__)


async def list_locales(api_key: ApiKey) -> str:
    """List the project's locales with plural rules and translation progress."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.get_locales()
    except LocoApiError as e:
        logger.warning(f"Failed to list locales: HTTP {e.status_code}")
        raise
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_locales": {
            "func": list_locales,
            "title": "List locales",
            "description": "List all locales in the project, including the source locale, plural rules and progress",
        }
    }
