from ogp_api.schemas.ogp import (
    OGPData,
    OGPRequest,
    OGPResponse,
    PlatformPreview,
    PlatformPreviews,
    ValidationChecks,
    ValidationResult,
)

__all__ = [
    "OGPData",
    "OGPRequest",
    "OGPResponse",
    "PlatformPreview",
    "PlatformPreviews",
    "ValidationChecks",
    "ValidationResult",
]
