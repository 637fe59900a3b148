"""Swagger 2.0 output adapter."""

from auto_swagger.parser.base import AutoSwaggerSettings
from .base import OutputAdapter, ParameterEntry, ResponseEntry, RouteDoc

DEFAULT_MEDIA_TYPES = ["application/json"]


def _render_parameter(entry: ParameterEntry) -> dict:
    param = {"in": entry.location, "name": entry.name, "required": entry.required}
    if entry.description is not None:
        param["description"] = entry.description
    if entry.schema_ref:
        param["schema"] = {"$ref": entry.schema_ref}
    else:
        param["type"] = entry.param_type or "string"
    if entry.items_type:
        param["items"] = {"type": entry.items_type}
        param["collectionFormat"] = entry.collection_format
    return param


def _render_response(entry: ResponseEntry) -> dict:
    response = {"description": entry.description}
    if entry.schema_ref:
        response["schema"] = {"$ref": entry.schema_ref}
    return response


class SwaggerAdapter(OutputAdapter):
    """Builds a Swagger 2.0 document with ``paths`` keyed by path, then method."""

    name = "swagger"
    override_fields = {
        "host": ("host",),
        "base_path": ("basePath",),
        "schemes": ("schemes",),
        "title": ("info", "title"),
        "description": ("info", "description"),
        "version": ("info", "version"),
    }

    def new_document(self) -> dict:
        return {
            "swagger": "2.0",
            "info": {"title": "", "version": "1"},
            "schemes": ["https"],
            "paths": {},
            "definitions": {},
            "securityDefinitions": {},
        }

    def apply_settings(self, document: dict, settings: AutoSwaggerSettings) -> dict:
        definitions = document.setdefault("securityDefinitions", {})
        for header in settings.api_key_headers:
            definitions[header] = {"type": "apiKey", "name": header, "in": "header"}
        return document

    def add_route(self, document: dict, route: RouteDoc, settings: AutoSwaggerSettings) -> dict:
        method = route.method.lower()
        operation = {
            "summary": route.summary,
            "description": route.description,
            "operationId": f"{route.function_name}.{method}.{route.path}",
            "consumes": route.consumes or list(DEFAULT_MEDIA_TYPES),
            "produces": route.produces or list(DEFAULT_MEDIA_TYPES),
            "parameters": [_render_parameter(p) for p in route.parameters],
            "responses": {code: _render_response(r) for code, r in route.responses.items()},
        }
        if route.tags:
            operation["tags"] = route.tags
        if route.security:
            operation["security"] = route.security

        paths = document.get("paths") or {}
        paths.setdefault(route.path, {})[method] = operation
        document["paths"] = paths
        return document
