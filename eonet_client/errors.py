"""EONET client errors."""


class EONETError(Exception):
    """Base error for all EONET client failures."""

    def __init__(self, message: str = "EONET request failed"):
        self.message = message
        super().__init__(self.message)


class InvalidURL(EONETError):
    """Request URL could not be built for an endpoint."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Invalid URL for endpoint: {endpoint!r}")


class InvalidParameter(EONETError):
    """Query parameter value has no string form the API accepts."""

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(f"Invalid query parameter {key}={value!r}")


class InvalidJSON(EONETError):
    """Response body (or a part of it) is not the expected JSON shape."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Invalid JSON from {source}")


class NetworkError(EONETError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, url: str, cause: BaseException | None = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")
