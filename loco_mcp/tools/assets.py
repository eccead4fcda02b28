from typing import Annotated, Any, Optional
import logging

from pydantic import Field

from loco_mcp.core import loco_client
from loco_mcp.core.errors import LocoApiError
from loco_mcp.core.models import ApiKey, AssetId, AssetType
from loco_mcp.utils import format_result

logger = logging.getLogger(__name__)

AssetTypeParam = Annotated[
    Optional[AssetType],
    Field(description="Content type of the asset: text, html or xml (remote default when omitted)"),
]
ContextParam = Annotated[Optional[str], Field(description="Contextual information for translators")]
NotesParam = Annotated[Optional[str], Field(description="Notes/guidance for translators")]


async def list_assets(
    api_key: ApiKey,
    filter: Annotated[
        Optional[str],
        Field(description="Filter by comma-separated tag names. Use * to match any tag, prefix with ! to negate"),
    ] = None,
) -> str:
    """List all translatable assets in the project, optionally filtered by tags."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.list_assets(filter)
    except LocoApiError as e:
        logger.warning(f"Failed to list assets (filter={filter!r}): HTTP {e.status_code}")
        raise
    return format_result(data)


async def get_asset(api_key: ApiKey, asset_id: AssetId) -> str:
    """Get a single asset by its ID."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.get_asset(asset_id)
    except LocoApiError as e:
        logger.warning(f"Failed to get asset {asset_id!r}: HTTP {e.status_code}")
        raise
    return format_result(data)


async def create_asset(
    api_key: ApiKey,
    id: Annotated[Optional[str], Field(description="Unique asset identifier (auto-generated if omitted)")] = None,
    text: Annotated[
        Optional[str], Field(description="Initial source language translation (required if id is empty)")
    ] = None,
    type: AssetTypeParam = None,
    context: ContextParam = None,
    notes: NotesParam = None,
) -> str:
    """Create a new translatable asset.

    Omitted fields are not sent at all; an empty string is sent as an empty value.
    """
    client = loco_client.get_client(api_key)
    try:
        data = await client.create_asset(id=id, text=text, type=type, context=context, notes=notes)
    except LocoApiError as e:
        logger.warning(f"Failed to create asset {id!r}: HTTP {e.status_code}")
        raise
    logger.info(f"Created asset {id!r}")
    return format_result(data)


async def update_asset(
    api_key: ApiKey,
    asset_id: Annotated[str, Field(description="The asset identifier to update")],
    new_id: Annotated[Optional[str], Field(description="New unique identifier for the asset")] = None,
    type: AssetTypeParam = None,
    context: ContextParam = None,
    notes: NotesParam = None,
) -> str:
    """Update an existing asset's properties (not tags or translations)."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.update_asset(asset_id, id=new_id, type=type, context=context, notes=notes)
    except LocoApiError as e:
        logger.warning(f"Failed to update asset {asset_id!r}: HTTP {e.status_code}")
        raise
    logger.info(f"Updated asset {asset_id!r}")
    return format_result(data)


async def delete_asset(
    api_key: ApiKey,
    asset_id: Annotated[str, Field(description="The asset identifier to delete")],
) -> str:
    """Permanently delete an asset."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.delete_asset(asset_id)
    except LocoApiError as e:
        logger.warning(f"Failed to delete asset {asset_id!r}: HTTP {e.status_code}")
        raise
    logger.info(f"Deleted asset {asset_id!r}")
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "list_assets": {
            "func": list_assets,
            "title": "List assets",
            "description": "List all translatable assets in the project. Optionally filter by tags.",
        },
        "get_asset": {
            "func": get_asset,
            "title": "Get asset",
            "description": "Get a single asset by its ID",
        },
        "create_asset": {
            "func": create_asset,
            "title": "Create asset",
            "description": "Create a new translatable asset in the project",
        },
        "update_asset": {
            "func": update_asset,
            "title": "Update asset",
            "description": "Update an existing asset's properties (not tags or translations)",
        },
        "delete_asset": {
            "func": delete_asset,
            "title": "Delete asset",
            "description": "Permanently delete an asset from the project",
        },
    }
