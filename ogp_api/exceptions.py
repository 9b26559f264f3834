class OGPServiceError(Exception):
    """Base class for failures surfaced by the verification pipeline."""


class InvalidURL(OGPServiceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid URL: {reason}")
        self.reason = reason


class ForbiddenDestination(OGPServiceError):
    def __init__(self, host: str) -> None:
        super().__init__("private IP addresses are not allowed")
        self.host = host


class FetchError(OGPServiceError):
    """Any network or remote failure while retrieving the target page."""


class FetchFailed(FetchError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to fetch URL: {cause}")


class HTTPStatusError(FetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error: {status_code}")
        self.status_code = status_code


class BodyReadError(FetchError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"failed to read response body: {cause}")
