"""Async client for the Loco REST API.

One `LocoClient` is created per tool call and carries only the API key it was
given. Each method performs exactly one HTTP request.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union
from urllib.parse import quote, urlencode

import httpx

from loco_mcp.core.config import get_config
from loco_mcp.core.errors import LocoApiError
from loco_mcp.core.models import Asset, AssetType, Locale, SuccessResponse, Translation
from loco_mcp.utils import get_base_url, get_endpoint, parse_text

logger = logging.getLogger(__name__)

DEFAULT_AUTH_SCHEME = "Loco"


def _present(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if v is not None}


@dataclass(frozen=True)
class JsonBody:
    fields: dict[str, Any] = field(default_factory=dict)
    content_type = "application/json"

    def encode(self) -> str:
        return json.dumps(_present(self.fields))


@dataclass(frozen=True)
class FormBody:
    fields: dict[str, Any] = field(default_factory=dict)
    content_type = "application/x-www-form-urlencoded"

    def encode(self) -> str:
        return urlencode({k: str(v) for k, v in _present(self.fields).items()})


@dataclass(frozen=True)
class TextBody:
    """Raw text body. An empty string is sent as an empty body."""

    text: str
    content_type = "text/plain"

    def encode(self) -> str:
        return self.text


Body = Union[JsonBody, FormBody, TextBody]


class LocoClient:
    """Thin adapter from Loco operations to HTTP requests."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        auth_scheme: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or get_base_url()).rstrip("/")
        if auth_scheme is None:
            auth_scheme = (get_config() or {}).get("auth_scheme") or DEFAULT_AUTH_SCHEME
        self.auth_scheme = auth_scheme
        self._transport = transport

    async def _request(self, method: str, path: str, body: Optional[Body] = None) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"{self.auth_scheme} {self.api_key}"}
        content = None
        if body is not None:
            headers["Content-Type"] = body.content_type
            content = body.encode().encode("utf-8")

        logger.debug(f"{method} {url}")
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(method, url, headers=headers, content=content)
            text = response.text

        if not response.is_success:
            raise LocoApiError(response.status_code, text)
        return parse_text(text)

    # Locales

    async def get_locales(self) -> List[Locale]:
        return await self._request("GET", get_endpoint("locales"))

    # Assets

    async def list_assets(self, filter: Optional[str] = None) -> List[Asset]:
        path = get_endpoint("assets")
        if filter:
            path = f"{path}?{urlencode({'filter': filter}, quote_via=quote)}"
        return await self._request("GET", path)

    async def get_asset(self, asset_id: str) -> Asset:
        return await self._request("GET", get_endpoint("asset", asset_id=asset_id))

    async def create_asset(
        self,
        id: Optional[str] = None,
        text: Optional[str] = None,
        type: Optional[AssetType] = None,
        context: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Asset:
        body = FormBody({"id": id, "text": text, "type": type, "context": context, "notes": notes})
        return await self._request("POST", get_endpoint("assets"), body)

    async def update_asset(
        self,
        asset_id: str,
        id: Optional[str] = None,
        type: Optional[AssetType] = None,
        context: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Asset:
        body = JsonBody({"id": id, "type": type, "context": context, "notes": notes})
        return await self._request("PATCH", get_endpoint("asset", asset_id=asset_id), body)

    async def delete_asset(self, asset_id: str) -> SuccessResponse:
        return await self._request("DELETE", get_endpoint("asset", asset_id=asset_id))

    # Translations

    async def get_translations(self, asset_id: str) -> List[Translation]:
        return await self._request("GET", get_endpoint("translations", asset_id=asset_id))

    async def get_translation(self, asset_id: str, locale: str) -> Translation:
        return await self._request("GET", get_endpoint("translation", asset_id=asset_id, locale=locale))

    async def update_translation(self, asset_id: str, locale: str, text: str) -> Translation:
        path = get_endpoint("translation", asset_id=asset_id, locale=locale)
        return await self._request("POST", path, TextBody(text))

    # Tags

    async def list_tags(self) -> List[str]:
        return await self._request("GET", get_endpoint("tags"))

    async def tag_asset(self, asset_id: str, tag: str) -> Asset:
        return await self._request("POST", get_endpoint("asset_tags", asset_id=asset_id), FormBody({"name": tag}))

    async def untag_asset(self, asset_id: str, tag: str) -> SuccessResponse:
        return await self._request("DELETE", get_endpoint("asset_tag", asset_id=asset_id, tag=tag))


def get_client(api_key: str) -> LocoClient:
    """Create the client used by a single tool call."""
    return LocoClient(api_key)
