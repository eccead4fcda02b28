"""Exceptions raised by the Loco adapter."""


class LocoError(Exception):
    """Base class for errors raised by loco-mcp."""


class ConfigError(LocoError):
    """Required configuration (base URL, API path) is missing."""


class LocoApiError(LocoError):
    """The Loco API answered with a non-success HTTP status.

    Carries the numeric status and the response body exactly as received.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Loco API error ({status_code}): {body}")
