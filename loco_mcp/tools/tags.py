from typing import Annotated, Any
import logging

from pydantic import Field

from loco_mcp.core import loco_client
from loco_mcp.core.errors import LocoApiError
from loco_mcp.core.models import ApiKey, AssetId
from loco_mcp.utils import format_result

logger = logging.getLogger(__name__)


async def list_tags(api_key: ApiKey) -> str:
    """List all tags in the project."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.list_tags()
    except LocoApiError as e:
        logger.warning(f"Failed to list tags: HTTP {e.status_code}")
        raise
    return format_result(data)


async def tag_asset(
    api_key: ApiKey,
    asset_id: Annotated[str, Field(description="The asset identifier to tag")],
    tag: Annotated[str, Field(description="The tag name to add")],
) -> str:
    """Add a tag to an asset, creating the tag if needed."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.tag_asset(asset_id, tag)
    except LocoApiError as e:
        logger.warning(f"Failed to tag {asset_id!r} with {tag!r}: HTTP {e.status_code}")
        raise
    return format_result(data)


async def untag_asset(
    api_key: ApiKey,
    asset_id: AssetId,
    tag: Annotated[str, Field(description="The tag name to remove")],
) -> str:
    """Remove a tag from an asset."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.untag_asset(asset_id, tag)
    except LocoApiError as e:
        logger.warning(f"Failed to remove tag {tag!r} from {asset_id!r}: HTTP {e.status_code}")
        raise
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_tags": {"func": list_tags, "title": "List tags", "description": "List all tags in the project"},
        "tag_asset": {
            "func": tag_asset,
            "title": "Tag asset",
            "description": "Add a tag to an asset. Creates the tag if it doesn't exist.",
        },
        "untag_asset": {"func": untag_asset, "title": "Untag asset", "description": "Remove a tag from an asset"},
    }
