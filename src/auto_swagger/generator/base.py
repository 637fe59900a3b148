"""Format-independent documentation models.

Every route is turned into a ``RouteDoc`` once; output adapters render
that entry into a Swagger document or a Postman collection.
"""

from pydantic import BaseModel

from auto_swagger.parser.base import AutoSwaggerSettings


def definition_ref(name: str) -> str:
    return f"#/definitions/{name}"


class ParameterEntry(BaseModel):
    """A single documented parameter."""

    location: str  # body / path / header / query
    name: str
    required: bool
    description: str | None = None
    param_type: str | None = None
    schema_ref: str | None = None
    items_type: str | None = None
    collection_format: str | None = None
    value: str | None = None  # placeholder value, e.g. for Authorization


class ResponseEntry(BaseModel):
    description: str
    schema_ref: str | None = None


class RouteDoc(BaseModel):
    """Documentation for one HTTP route."""

    function_name: str
    method: str
    path: str
    summary: str
    description: str = ""
    tags: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[ParameterEntry]
    responses: dict[str, ResponseEntry]
    security: list[dict[str, list[str]]] = []

    def parameters_in(self, location: str) -> list[ParameterEntry]:
        return [p for p in self.parameters if p.location == location]


class OutputAdapter:
    """Renders route entries into one target document shape.

    Subclasses declare where each scalar setting lands in their document
    through ``override_fields``, a map of settings attribute to key path.
    Every step takes the document being built and returns it.
    """

    name: str = ""
    override_fields: dict[str, tuple[str, ...]] = {}

    def new_document(self) -> dict:
        raise NotImplementedError

    def apply_settings(self, document: dict, settings: AutoSwaggerSettings) -> dict:
        """Apply settings that are more than a scalar copy."""
        return document

    def add_route(self, document: dict, route: RouteDoc, settings: AutoSwaggerSettings) -> dict:
        raise NotImplementedError
