from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """A request the proxy cannot serve as asked (bad game, shop, item...).

    ``http_status`` is the status the global handler answers with; ``details``
    is echoed in the error envelope.
    """

    http_status = 400

    def __init__(self, message: str = "Invalid request", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceValidationError):
    """Unsupported game, unknown shop, or an item missing from the statistics."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details)


class UpstreamError(Exception):
    """A call to the aggregator or the statistics API did not produce usable JSON."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        return self.message


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-2xx status.

    ``body`` is the decoded JSON error payload, or None when it was not JSON.
    Services may overwrite ``message`` with the text shown to clients.
    """

    def __init__(self, status_code: int, url: Optional[str] = None, body: Any = None, text: str = ""):
        super().__init__(f"Upstream returned HTTP {status_code}", url)
        self.status_code = status_code
        self.body = body
        self.text = text

    @property
    def detail(self) -> Optional[str]:
        """FastAPI-style ``detail`` of the upstream error body, if any"""
        if isinstance(self.body, dict) and self.body.get("detail") is not None:
            return str(self.body["detail"])
        return None


class UpstreamConnectionError(UpstreamError):
    """Transport failure, timeout, or a body that is not JSON."""
