"""Response formatting."""

from collections.abc import Mapping

from auto_swagger.parser.base import ResponseSpec
from .base import ResponseEntry, definition_ref


def format_responses(responses: Mapping[str, ResponseSpec | str] | None) -> dict[str, ResponseEntry]:
    """Map declared responses to entries keyed by status code, in declaration order.

    A route without declared responses documents a bare ``200``.
    """
    if not responses:
        return {"200": ResponseEntry(description="200 response")}

    formatted: dict[str, ResponseEntry] = {}
    for status_code, details in responses.items():
        code = str(status_code)
        if isinstance(details, str):
            formatted[code] = ResponseEntry(description=details)
            continue
        entry = ResponseEntry(description=details.description or f"{code} response")
        if details.body_type:
            entry.schema_ref = definition_ref(details.body_type)
        formatted[code] = entry
    return formatted
