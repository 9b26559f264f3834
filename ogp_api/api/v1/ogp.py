from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from ogp_api.api.deps import enforce_rate_limit, get_ogp_service
from ogp_api.exceptions import FetchError, ForbiddenDestination, InvalidURL
from ogp_api.schemas import OGPRequest, OGPResponse
from ogp_api.services.ogp import OGPService

router = APIRouter(prefix="/ogp", tags=["ogp"])


@router.post(
    "/verify",
    response_model=OGPResponse,
    dependencies=[Depends(enforce_rate_limit)],
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": OGPRequest.model_json_schema()}},
        }
    },
)
async def verify_ogp(
    request: Request,
    service: Annotated[OGPService, Depends(get_ogp_service)],
) -> OGPResponse:
    """Fetch the page at ``url`` and report its OGP tags, checks and previews."""
    # Decoded here rather than as a body parameter so the rate limit is
    # charged before the body is looked at
    try:
        payload = OGPRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON"
        ) from exc

    if not payload.url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="URL is required"
        )

    try:
        return await service.verify(payload.url)
    except InvalidURL as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ForbiddenDestination as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)
        ) from exc
    except FetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error fetching OGP data: {exc}",
        ) from exc
