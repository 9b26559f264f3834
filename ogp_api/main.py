from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ogp_api.api import api_router
from ogp_api.config import Settings, settings as default_settings
from ogp_api.logging import setup_logging
from ogp_api.services.fetcher import PageFetcher
from ogp_api.services.ogp import OGPService
from ogp_api.services.ratelimit import RateLimiter


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        # Startup
        setup_logging(settings.log_level)
        app.state.rate_limiter = RateLimiter(
            limit=settings.rate_limit_requests,
            window=settings.rate_limit_window,
            sweep_interval=settings.rate_limit_sweep_interval,
        )
        app.state.ogp_service = OGPService(
            PageFetcher(
                timeout=settings.request_timeout,
                user_agent=settings.user_agent,
                strict_address_check=settings.strict_address_check,
            )
        )
        yield
        # Shutdown
        await app.state.ogp_service.aclose()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(api_router)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": settings.app_name}

    @app.get("/", tags=["system"])
    async def index() -> dict[str, str]:
        return {"message": "OGP Verification Service", "version": settings.version}

    return app


app = create_app()
