import logging
from datetime import datetime, timezone

from ogp_api.schemas.ogp import OGPResponse
from ogp_api.services.extractor import extract_ogp_data
from ogp_api.services.fetcher import PageFetcher
from ogp_api.services.previews import generate_previews
from ogp_api.services.validation import validate_ogp_data

logger = logging.getLogger(__name__)


class OGPService:
    """Fetch a page and report its Open Graph metadata."""

    def __init__(self, fetcher: PageFetcher | None = None) -> None:
        self.fetcher = fetcher or PageFetcher()

    async def verify(self, url: str) -> OGPResponse:
        body = await self.fetcher.fetch(url)

        ogp_data = extract_ogp_data(body)
        validation = validate_ogp_data(ogp_data)
        previews = generate_previews(ogp_data)

        logger.info(
            "Verified %s: valid=%s warnings=%d errors=%d",
            url,
            validation.is_valid,
            len(validation.warnings),
            len(validation.errors),
        )
        return OGPResponse(
            url=url,
            ogp_data=ogp_data,
            validation=validation,
            previews=previews,
            timestamp=datetime.now(timezone.utc),
        )

    async def aclose(self) -> None:
        await self.fetcher.aclose()
