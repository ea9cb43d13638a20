"""Lenient JSON body reading for the API routes.

Routes hand raw field values to the use cases, which verify the caller's
token before judging input shape. Parsing the body here must therefore never
reject a request on its own: anything that is not a JSON object reads as an
empty one, and the use case reports the missing field once the caller is
known.
"""

import json
from typing import Any

from fastapi import Request

from board.util.logging import get_logger

logger = get_logger(__name__)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Request body as a JSON object, or ``{}`` when it is not one."""
    raw = await request.body()
    if not raw:
        return {}

    try:
        body = json.loads(raw)
    except ValueError:
        logger.debug("Unparseable body on %s", request.url.path)
        return {}

    return body if isinstance(body, dict) else {}
