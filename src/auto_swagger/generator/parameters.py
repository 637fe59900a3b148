"""Parameter assembly for a single route.

Order: body, path, header, query. Explicit header and query mappings
replace the native ``request.parameters`` block entirely; the two are
never merged.
"""

import logging
from typing import Any

from auto_swagger.parser.base import ParameterSpec, PathParameterSpec, RouteDeclaration
from .base import ParameterEntry, definition_ref
from .path_params import resolve_path_parameters

log = logging.getLogger(__name__)

BODY_DESCRIPTION = "Body required in the request"
AUTHORIZATION_HEADER = "Authorization"
AUTHORIZATION_PLACEHOLDER = "Token {{token}}"
DEFAULT_ARRAY_ITEMS_TYPE = "string"


def _native_required(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, dict):
        return bool(value.get("required", default))
    return default


def _native_description(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("description")
    return None


def explicit_path_parameters(route: RouteDeclaration) -> dict[str, PathParameterSpec] | None:
    """Path metadata from ``pathParameters``, else from the native block."""
    if route.path_parameters is not None:
        return route.path_parameters
    native = route.native_parameters
    if native is None or native.paths is None:
        return None
    return {
        name: PathParameterSpec(
            required=_native_required(value, True),
            description=_native_description(value),
        )
        for name, value in native.paths.items()
    }


def _native_specs(block: dict[str, Any] | None) -> dict[str, ParameterSpec]:
    return {
        name: ParameterSpec(
            required=_native_required(value, False),
            type="string",
            description=_native_description(value),
        )
        for name, value in (block or {}).items()
    }


def _header_parameters(route: RouteDeclaration) -> list[ParameterEntry]:
    specs = route.header_parameters
    if specs is None:
        native = route.native_parameters
        specs = _native_specs(native.headers if native else None)

    entries = [
        ParameterEntry(
            location="header",
            name=name,
            required=spec.required,
            param_type=spec.type or "string",
            description=spec.description,
        )
        for name, spec in specs.items()
    ]

    if route.authorization and not any(e.name.lower() == AUTHORIZATION_HEADER.lower() for e in entries):
        entries.append(
            ParameterEntry(
                location="header",
                name=AUTHORIZATION_HEADER,
                required=True,
                param_type="string",
                value=AUTHORIZATION_PLACEHOLDER,
            )
        )
    return entries


def _query_parameters(route: RouteDeclaration) -> list[ParameterEntry]:
    specs = route.query_string_parameters
    if specs is None:
        native = route.native_parameters
        specs = _native_specs(native.querystrings if native else None)

    entries = []
    for name, spec in specs.items():
        entry = ParameterEntry(
            location="query",
            name=name,
            required=spec.required,
            param_type=spec.type or "string",
            description=spec.description,
        )
        if spec.type == "array":
            items_type = spec.array_items_type
            if not items_type:
                log.warning(
                    "Query parameter %r on %s %s is an array without arrayItemsType, using %r",
                    name, route.method, route.path, DEFAULT_ARRAY_ITEMS_TYPE,
                )
                items_type = DEFAULT_ARRAY_ITEMS_TYPE
            entry.items_type = items_type
            entry.collection_format = "multi"
        entries.append(entry)
    return entries


def assemble_parameters(route: RouteDeclaration) -> list[ParameterEntry]:
    """Build the ordered parameter list for one route."""
    parameters: list[ParameterEntry] = []

    if route.body_type:
        parameters.append(
            ParameterEntry(
                location="body",
                name="body",
                required=True,
                description=BODY_DESCRIPTION,
                schema_ref=definition_ref(route.body_type),
            )
        )

    parameters.extend(resolve_path_parameters(route.path, explicit_path_parameters(route)))
    parameters.extend(_header_parameters(route))
    parameters.extend(_query_parameters(route))
    return parameters


def build_security(api_key_headers: list[str]) -> list[dict[str, list[str]]]:
    """One requirement naming every configured API-key header, or nothing."""
    if not api_key_headers:
        return []
    return [{name: [] for name in api_key_headers}]
