"""Route collection: walks functions and their events into the document."""

import logging
from collections.abc import Iterator, Mapping

from auto_swagger.parser.base import AutoSwaggerSettings, FunctionDeclaration, RouteDeclaration
from .base import OutputAdapter, RouteDoc
from .parameters import assemble_parameters, build_security
from .responses import format_responses

log = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    if not path.startswith("/"):
        return f"/{path}"
    return path


def iter_routes(functions: Mapping[str, FunctionDeclaration]) -> Iterator[tuple[str, RouteDeclaration]]:
    """Yield ``(function_name, route)`` for every documentable HTTP event."""
    for function_name, function in functions.items():
        for event in function.events:
            route = event.route
            if route is None:
                continue
            if isinstance(route, str):
                # TODO: expand "METHOD /path" shorthand into a RouteDeclaration
                log.debug("Skipping shorthand event %r of %s", route, function_name)
                continue
            if route.excluded:
                log.debug("Skipping excluded route %s %s of %s", route.method, route.path, function_name)
                continue
            yield function_name, route


def build_route_doc(function_name: str, route: RouteDeclaration, settings: AutoSwaggerSettings) -> RouteDoc:
    return RouteDoc(
        function_name=function_name,
        method=route.method,
        path=normalize_path(route.path),
        summary=route.summary or function_name,
        description=route.description or "",
        tags=route.swagger_tags,
        consumes=route.consumes,
        produces=route.produces,
        parameters=assemble_parameters(route),
        responses=format_responses(route.declared_responses),
        security=build_security(settings.api_key_headers),
    )


def collect(
    functions: Mapping[str, FunctionDeclaration],
    settings: AutoSwaggerSettings,
    adapter: OutputAdapter,
    document: dict,
) -> dict:
    """Add every qualifying route to ``document`` and return it."""
    count = 0
    for function_name, route in iter_routes(functions):
        document = adapter.add_route(document, build_route_doc(function_name, route, settings), settings)
        count += 1
    log.info("Documented %d routes as %s", count, adapter.name)
    return document
