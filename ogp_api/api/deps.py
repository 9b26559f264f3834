from fastapi import Depends, HTTPException, Request, status

from ogp_api.services.ogp import OGPService
from ogp_api.services.ratelimit import RateLimiter


def get_client_key(request: Request) -> str:
    """Identify the caller by X-Forwarded-For, else the peer address."""
    forwarded_for = request.headers.get("X-Forwarded-For", "").strip()
    if forwarded_for:
        return forwarded_for
    # Starlette already splits the port off the peer address
    return request.client.host if request.client else "unknown"


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def get_ogp_service(request: Request) -> OGPService:
    return request.app.state.ogp_service


async def enforce_rate_limit(
    client_key: str = Depends(get_client_key),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> None:
    if not limiter.allow(client_key):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded",
        )
