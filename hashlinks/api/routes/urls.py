"""URL shortening API routes.

This module contains the endpoints for URL operations:
- Create short URL (POST /shorter)
- Redirect to original URL (GET /redirect/{short_code})
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError

from ...core.store import URLStore, get_store
from ...models.url import ShortenRequest
from ...schemas.url import ShortenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["URLs"])


@router.post(
    "/shorter",
    response_model=ShortenResponse,
    responses={
        200: {"description": "Short URL created"},
        400: {"description": "Request body is not a valid JSON object"},
    },
    summary="Create a short URL",
    description="Create the short code for a URL. The same URL always gets the same code.",
)
async def shorten_url(
    request: Request,
    store: URLStore = Depends(get_store),
):
    """Create a short URL from a long URL.

    The body is decoded by hand so that malformed JSON is reported as a
    400 with the decoder's message, whatever the request content type.

    Args:
        request: FastAPI request object.
        store: URL store instance.

    Returns:
        The short code, or the decode error.
    """
    body = await request.body()
    try:
        url_data = ShortenRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Invalid shorten request body: {e}")
        return PlainTextResponse(str(e), status_code=400)

    short_code = store.put(url_data.url)
    return ShortenResponse(short_url=short_code)


@router.get(
    "/redirect/{short_code:path}",
    response_class=RedirectResponse,
    status_code=302,
    responses={
        302: {"description": "Redirect to original URL"},
        404: {"description": "Short URL not found"},
    },
    summary="Redirect to original URL",
    description="Redirect to the original URL associated with the short code.",
)
async def redirect_to_url(
    short_code: str,
    store: URLStore = Depends(get_store),
) -> RedirectResponse:
    """Redirect to the original URL.

    Args:
        short_code: The short URL code.
        store: URL store instance.

    Returns:
        Redirect response to original URL.
    """
    url_record = store.get(short_code)
    return RedirectResponse(url=url_record.original_url, status_code=302)
