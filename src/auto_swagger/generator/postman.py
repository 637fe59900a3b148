"""Postman Collection v2.1 output adapter.

Requests carry ``Content-Type`` headers derived from ``consumes`` instead
of a body parameter.
"""

from auto_swagger.parser.base import AutoSwaggerSettings
from .base import OutputAdapter, ParameterEntry, RouteDoc
from .path_params import TEMPLATE_PARAM_RE

POSTMAN_SCHEMA = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"


def _header(entry: ParameterEntry) -> dict:
    header = {"key": entry.name, "value": entry.value or "", "type": "text"}
    if entry.description:
        header["description"] = entry.description
    return header


def postman_path(path: str) -> str:
    """Rewrite ``{name}`` placeholders as Postman's ``:name`` path variables."""
    return TEMPLATE_PARAM_RE.sub(r":\1", path)


def _keyed(entry: ParameterEntry) -> dict:
    item = {"key": entry.name, "value": ""}
    if entry.description:
        item["description"] = entry.description
    return item


class PostmanAdapter(OutputAdapter):
    name = "postman"
    override_fields = {
        "host": ("host",),
        "title": ("info", "name"),
        "description": ("info", "description"),
        "version": ("info", "schema"),
    }

    def new_document(self) -> dict:
        return {
            "info": {
                "_postman_id": "",
                "name": "Postman collection",
                "description": "",
                "schema": POSTMAN_SCHEMA,
            },
            "host": "example.com",
            "item": [],
        }

    def add_route(self, document: dict, route: RouteDoc, settings: AutoSwaggerSettings) -> dict:
        # route.security is not rendered; a collection item has no slot for it
        host = document.get("host", "")
        protocol = settings.schemes[0] if settings.schemes else "https"
        path = postman_path(route.path)
        header = [{"key": "Content-Type", "value": media_type, "type": "text"} for media_type in route.consumes or []]
        header.extend(_header(p) for p in route.parameters_in("header"))

        url = {
            "protocol": protocol,
            "raw": f"{protocol}://{host}{path}",
            "host": [host],
            "path": [segment for segment in path.split("/") if segment],
            "query": [_keyed(p) for p in route.parameters_in("query")],
        }
        variables = [_keyed(p) for p in route.parameters_in("path")]
        if variables:
            url["variable"] = variables

        items = document.get("item") or []
        items.append(
            {
                "name": route.summary,
                "request": {
                    "method": route.method.upper(),
                    "header": header,
                    "url": url,
                    "description": route.description,
                },
            }
        )
        document["item"] = items
        return document
