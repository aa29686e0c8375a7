"""
Response decoding shared by the sync and async clients.

List-returning endpoints wrap their results in ``{"items": [...]}``. The envelope is
decoded first, then ``items`` is validated against the element type of the operation.
"""

from collections.abc import Collection, Mapping
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import APIError, DecodeError
from .types.envelope import BlockRef, ItemsEnvelope

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(item_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(list[item_type])


def decode_model(response: httpx.Response, model: type[M]) -> M:
    """Decode an unwrapped body straight into ``model``."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"decoding {model.__name__}: {exc}", body=response.text) from exc


def decode_items(response: httpx.Response, item_type: type[T]) -> list[T]:
    try:
        envelope = ItemsEnvelope.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"decoding response envelope: {exc}", body=response.text) from exc
    try:
        return _list_adapter(item_type).validate_python(envelope.items)
    except ValidationError as exc:
        name = getattr(item_type, "__name__", str(item_type))
        raise DecodeError(f"decoding {name} items: {exc}", body=response.text) from exc


def decode_ids(response: httpx.Response) -> list[str]:
    """Project ``{"items": [{"id": ...}]}`` onto a flat list of IDs, in server order."""
    return [ref.id for ref in decode_items(response, BlockRef)]


def raise_for_status(response: httpx.Response, ok_statuses: Collection[int]) -> httpx.Response:
    """Return ``response`` if its status is accepted, else raise ``APIError`` with the body attached."""
    if response.status_code in ok_statuses:
        return response

    body = response.text
    message: str | None = None
    if "application/json" in response.headers.get("content-type", ""):
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, Mapping):
            found = payload.get("message") or payload.get("error")
            message = str(found) if found else None
    raise APIError(status_code=response.status_code, message=message, body=body)
