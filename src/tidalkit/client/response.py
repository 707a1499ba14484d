"""Response mapping -- turns decoded JSON into the typed wire models.

:func:`map_response` trusts the remote payload structurally: fields are
passed through by name and unknown fields are kept. Only the shape needed
to build the model (a JSON object, pagination fields with the right types)
is checked.

:func:`extract_response_data` decodes an :class:`httpx.Response` body for
the HTTP clients.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
import pydantic

from tidalkit.exceptions import ValidationError

M = TypeVar("M", bound=pydantic.BaseModel)


def map_response(model: type[M], data: Any) -> M:
    """Validate *data* against *model*.

    Args:
        model: The pydantic model of the endpoint's output.
        data: The decoded JSON body.

    Returns:
        A *model* instance.

    Raises:
        ValidationError: If *data* is not an object or misses required fields.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected a JSON object for {model.__name__}, got {type(data).__name__}"
        )
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Unexpected {model.__name__} response: {exc}") from exc


def extract_response_data(response: httpx.Response) -> Any:
    """Extract the body from an HTTP response.

    Attempts to parse the body as JSON first. If that fails (e.g. the
    response is HTML or plain text), returns the raw text. Returns
    ``None`` for responses with no content.
    """
    if not response.content:
        return None

    try:
        return response.json()
    except ValueError:
        return response.text
