"""Request-scoped context.

We use `contextvars` so log records can carry the current request id
without passing it through every call.
"""

from __future__ import annotations

import contextvars
import uuid

request_id_var: contextvars.ContextVar[uuid.UUID | None] = contextvars.ContextVar(
    "request_id", default=None
)


def new_request_id() -> uuid.UUID:
    return uuid.uuid4()


def set_request_id(request_id: uuid.UUID | None) -> contextvars.Token:
    return request_id_var.set(request_id)


def get_request_id() -> uuid.UUID | None:
    return request_id_var.get()


def reset_request_id(token: contextvars.Token) -> None:
    request_id_var.reset(token)
