from urllib.parse import quote

from loco_mcp.core.config import get_config
from loco_mcp.core.errors import ConfigError


def encode_segment(value: str) -> str:
    """Percent-encode a single path segment, including '/'.

    Segments made only of dots are escaped too, otherwise "." and ".." would be
    resolved as relative path steps.
    """
    if value and value.strip(".") == "":
        return "%2E" * len(value)
    return quote(value, safe="")


def get_base_url() -> str:
    _cfg = get_config() or {}
    base_url = (_cfg.get("loco_api_url") or "").rstrip("/")
    if not base_url:
        raise ConfigError("'loco_api_url' must be set in config.yaml")
    return base_url


def get_endpoint(key: str, **segments: str) -> str:
    """Return the API path for `key` with each segment percent-encoded.

    The result is relative to the base URL, e.g.
    get_endpoint("asset_tag", asset_id="a b", tag="urgent") -> "/assets/a%20b/tags/urgent.json"
    """
    _cfg = get_config() or {}
    path = (_cfg.get("api_paths") or {}).get(key)
    if not path:
        raise ConfigError(f"Missing API path for key '{key}' in config.yaml under 'api_paths'")

    return path.format(**{name: encode_segment(value) for name, value in segments.items()})
