from ogp_api.services.extractor import extract_ogp_data
from ogp_api.services.fetcher import PageFetcher, is_private_host
from ogp_api.services.ogp import OGPService
from ogp_api.services.previews import PLATFORMS, generate_previews, truncate
from ogp_api.services.ratelimit import RateLimiter
from ogp_api.services.validation import validate_ogp_data

__all__ = [
    "OGPService",
    "PLATFORMS",
    "PageFetcher",
    "RateLimiter",
    "extract_ogp_data",
    "generate_previews",
    "is_private_host",
    "truncate",
    "validate_ogp_data",
]
