"""Application middleware."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from profiledir.core.context import new_request_id, reset_request_id, set_request_id


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach a request id to contextvars for log correlation.

    Also adds `X-Request-Id` to the response.
    """
    request_id = new_request_id()
    token = set_request_id(request_id)
    try:
        response = await call_next(request)
        response.headers["X-Request-Id"] = str(request_id)
        return response
    finally:
        # Always clean up to avoid context leaking across requests.
        reset_request_id(token)
