import ipaddress
import logging
import re
from urllib.parse import urlsplit

import httpx

from ogp_api.exceptions import (
    BodyReadError,
    FetchFailed,
    ForbiddenDestination,
    HTTPStatusError,
    InvalidURL,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "OGP-Verification-Service/1.0"

# Textual prefix match on the hostname, not a range test: "127.0.0.1.nip.io"
# is rejected while "[::ffff:10.0.0.1]" is not.
PRIVATE_HOST_PATTERN = re.compile(
    r"^(10\.|172\.(1[6-9]|2[0-9]|3[01])\.|192\.168\.|127\.|::1|localhost)"
)


def is_private_host(host: str, strict: bool = False) -> bool:
    """Return True when ``host`` names a disallowed internal destination.

    With ``strict`` enabled, IP literals are additionally checked against
    the private, loopback, link-local and reserved address ranges.
    """
    if PRIVATE_HOST_PATTERN.match(host):
        return True
    if not strict:
        return False
    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        address = address.ipv4_mapped
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_reserved
        or address.is_unspecified
    )


def parse_target(url: str) -> str:
    """Check that ``url`` is an absolute http(s) URL and return its host."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port  # raises ValueError for an out-of-range port
        # httpx parses stricter (IDNA, whitespace); reject what it would refuse
        httpx.URL(url)
    except (ValueError, httpx.InvalidURL) as exc:
        raise InvalidURL(str(exc)) from exc
    if parts.scheme not in ("http", "https"):
        raise InvalidURL(f"unsupported scheme {parts.scheme!r}")
    if not host:
        raise InvalidURL("missing host")
    return host


class PageFetcher:
    """Guarded single-shot HTTP GET for user supplied URLs."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        strict_address_check: bool = False,
    ) -> None:
        self.strict_address_check = strict_address_check
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    def check_destination(self, url: str) -> str:
        host = parse_target(url)
        if is_private_host(host, strict=self.strict_address_check):
            logger.warning("Rejected private destination %s", host)
            raise ForbiddenDestination(host)
        return host

    async def fetch(self, url: str) -> bytes:
        """Fetch ``url`` and return the raw response body.

        The destination is checked before any connection is opened. Only a
        200 response is accepted; nothing is retried.
        """
        self.check_destination(url)

        try:
            async with self.client.stream("GET", url) as response:
                if response.status_code != httpx.codes.OK:
                    logger.warning("Fetch of %s returned HTTP %s", url, response.status_code)
                    raise HTTPStatusError(response.status_code)
                try:
                    return await response.aread()
                except httpx.HTTPError as exc:
                    logger.warning("Reading body of %s failed: %s", url, exc)
                    raise BodyReadError(exc) from exc
        except httpx.HTTPError as exc:
            logger.warning("Fetch of %s failed: %s", url, exc)
            raise FetchFailed(exc) from exc

    async def aclose(self) -> None:
        await self.client.aclose()
