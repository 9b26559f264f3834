import httpx
import pytest
from fastapi.testclient import TestClient

from ogp_api.api.deps import get_ogp_service
from ogp_api.config import Settings
from ogp_api.main import create_app
from ogp_api.services.fetcher import PageFetcher
from ogp_api.services.ogp import OGPService

SAMPLE_HTML = """
<html>
  <head>
    <title>Regular Title</title>
    <meta property="og:title" content="Test Title" />
    <meta property="og:description" content="Test Description" />
    <meta property="og:image" content="https://example.com/image.jpg" />
    <meta property="og:url" content="https://example.com" />
    <meta property="og:type" content="website" />
    <meta property="og:site_name" content="Test Site" />
  </head>
  <body></body>
</html>
"""


def make_service(handler) -> OGPService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OGPService(PageFetcher(client=client))


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def page_handler(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, text=SAMPLE_HTML)

    return handler


@pytest.fixture
def client(page_handler):
    app = create_app(Settings(rate_limit_requests=10, rate_limit_window=60.0))
    service = make_service(page_handler)
    app.dependency_overrides[get_ogp_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
