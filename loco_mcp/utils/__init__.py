from loco_mcp.utils.get_endpoint import encode_segment, get_base_url, get_endpoint
from loco_mcp.utils.response_utils import format_result, parse_text

__all__ = ["encode_segment", "get_base_url", "get_endpoint", "format_result", "parse_text"]
