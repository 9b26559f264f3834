import logging

from bs4 import BeautifulSoup

from ogp_api.schemas.ogp import OGPData

logger = logging.getLogger(__name__)

# og:* property -> OGPData field
OGP_PROPERTIES: dict[str, str] = {
    "og:title": "title",
    "og:description": "description",
    "og:image": "image",
    "og:url": "url",
    "og:type": "type",
    "og:site_name": "site_name",
    "og:image:width": "image_width",
    "og:image:height": "image_height",
    "og:image:alt": "image_alt",
}


def extract_ogp_data(document: str | bytes | BeautifulSoup) -> OGPData:
    """Collect the recognized ``og:*`` meta tags of a document.

    ``document`` may be raw markup or an already parsed tree. Tags are read
    in document order, so a property repeated later in the page overrides
    earlier occurrences. Markup that cannot be parsed yields an empty
    record instead of an error.
    """
    if isinstance(document, BeautifulSoup):
        soup = document
    else:
        try:
            soup = BeautifulSoup(document, "html.parser")
        except Exception as exc:
            logger.debug("Markup could not be parsed, returning empty OGP data: %s", exc)
            return OGPData()

    fields: dict[str, str] = {}
    for tag in soup.find_all("meta"):
        field = OGP_PROPERTIES.get(tag.get("property", ""))
        if field is not None:
            fields[field] = tag.get("content", "")

    return OGPData(**fields)
