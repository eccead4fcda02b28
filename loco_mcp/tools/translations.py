from typing import Annotated, Any
import logging

from pydantic import Field

from loco_mcp.core import loco_client
from loco_mcp.core.errors import LocoApiError
from loco_mcp.core.models import ApiKey, AssetId, LocaleCode
from loco_mcp.utils import format_result

logger = logging.getLogger(__name__)


async def get_translations(api_key: ApiKey, asset_id: AssetId) -> str:
    """Get all translations for an asset across all locales."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.get_translations(asset_id)
    except LocoApiError as e:
        logger.warning(f"Failed to get translations of {asset_id!r}: HTTP {e.status_code}")
        raise
    return format_result(data)


async def get_translation(api_key: ApiKey, asset_id: AssetId, locale: LocaleCode) -> str:
    """Get a single translation for an asset in a specific locale."""
    client = loco_client.get_client(api_key)
    try:
        data = await client.get_translation(asset_id, locale)
    except LocoApiError as e:
        logger.warning(f"Failed to get {locale!r} translation of {asset_id!r}: HTTP {e.status_code}")
        raise
    return format_result(data)


async def update_translation(
    api_key: ApiKey,
    asset_id: AssetId,
    locale: LocaleCode,
    text: Annotated[str, Field(description="The translation text (empty string marks as untranslated)")],
) -> str:
    """Add or update a translation.

    The text is posted as the raw request body, so "" clears the translation.
    """
    client = loco_client.get_client(api_key)
    try:
        data = await client.update_translation(asset_id, locale, text)
    except LocoApiError as e:
        logger.warning(f"Failed to update {locale!r} translation of {asset_id!r}: HTTP {e.status_code}")
        raise
    logger.info(f"Updated {locale!r} translation of {asset_id!r}")
    return format_result(data)


def get_tools() -> dict[str, Any]:
    return {
        "get_translations": {
            "func": get_translations,
            "title": "Get translations",
            "description": "Get all translations for an asset across all locales",
        },
        "get_translation": {
            "func": get_translation,
            "title": "Get translation",
            "description": "Get a single translation for an asset in a specific locale",
        },
        "update_translation": {
            "func": update_translation,
            "title": "Update translation",
            "description": "Add or update a translation for an asset in a specific locale",
        },
    }
