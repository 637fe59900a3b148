"""Data models for the declarative service input.

The service file (a serverless-style YAML document) is validated into
these models before any documentation is generated. Field aliases follow
the camelCase keys used in the service file.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _InputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PathParameterSpec(_InputModel):
    """Explicit metadata for one path parameter."""

    required: bool = True
    description: str | None = None


class ParameterSpec(_InputModel):
    """A header or query string parameter declared on a route."""

    required: bool = False
    type: str | None = None
    description: str | None = None
    array_items_type: str | None = Field(default=None, alias="arrayItemsType")


class ResponseSpec(_InputModel):
    description: str | None = None
    body_type: str | None = Field(default=None, alias="bodyType")


class NativeParameters(_InputModel):
    """The framework-native ``request.parameters`` block.

    Values are either a bare ``required`` flag or a mapping holding one.
    """

    paths: dict[str, Any] | None = None
    headers: dict[str, Any] | None = None
    querystrings: dict[str, Any] | None = None


class NativeRequest(_InputModel):
    parameters: NativeParameters | None = None


def _stringify_keys(value: Any) -> Any:
    # YAML reads `200:` as an int key
    if isinstance(value, dict):
        return {str(k): v for k, v in value.items()}
    return value


class RouteDeclaration(_InputModel):
    """One HTTP-triggered event of a function."""

    method: str
    path: str
    summary: str | None = None
    description: str | None = None
    swagger_tags: list[str] | None = Field(default=None, alias="swaggerTags")
    consumes: list[str] | None = None
    produces: list[str] | None = None
    body_type: str | None = Field(default=None, alias="bodyType")
    path_parameters: dict[str, PathParameterSpec] | None = Field(default=None, alias="pathParameters")
    header_parameters: dict[str, ParameterSpec] | None = Field(default=None, alias="headerParameters")
    query_string_parameters: dict[str, ParameterSpec] | None = Field(default=None, alias="queryStringParameters")
    request: NativeRequest | None = None
    responses: dict[str, ResponseSpec | str] | None = None
    response_data: dict[str, ResponseSpec | str] | None = Field(default=None, alias="responseData")
    excluded: bool = Field(default=False, alias="exclude")
    authorization: bool = False

    @field_validator("responses", "response_data", mode="before")
    @classmethod
    def _status_codes_as_strings(cls, value: Any) -> Any:
        return _stringify_keys(value)

    @property
    def native_parameters(self) -> NativeParameters | None:
        if self.request is None:
            return None
        return self.request.parameters

    @property
    def declared_responses(self) -> dict[str, ResponseSpec | str] | None:
        if self.response_data is not None:
            return self.response_data
        return self.responses


class FunctionEvent(_InputModel):
    """A trigger event. Only the two HTTP trigger kinds are modelled."""

    http: RouteDeclaration | str | None = None
    http_api: RouteDeclaration | str | None = Field(default=None, alias="httpApi")

    @property
    def route(self) -> RouteDeclaration | str | None:
        if self.http is not None:
            return self.http
        return self.http_api


class FunctionDeclaration(_InputModel):
    handler: str | None = None
    events: list[FunctionEvent] = []

    @field_validator("events", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AutoSwaggerSettings(_InputModel):
    """Top-level overrides read from ``custom.autoswagger``."""

    host: str | None = None
    base_path: str | None = Field(default=None, alias="basePath")
    schemes: list[Literal["http", "https"]] | None = None
    title: str | None = None
    description: str | None = None
    version: str | None = None
    swagger_files: list[str] = Field(default=[], alias="swaggerFiles")
    api_key_headers: list[str] = Field(default=[], alias="apiKeyHeaders")

    @field_validator("version", "title", mode="before")
    @classmethod
    def _scalar_as_string(cls, value: Any) -> Any:
        # `version: 1.0` arrives as a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("swagger_files", "api_key_headers", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CustomSection(_InputModel):
    autoswagger: AutoSwaggerSettings = AutoSwaggerSettings()

    @field_validator("autoswagger", mode="before")
    @classmethod
    def _none_as_default(cls, value: Any) -> Any:
        return {} if value is None else value


class ServiceConfig(_InputModel):
    """A parsed service file."""

    service: Any = None
    functions: dict[str, FunctionDeclaration] = {}
    custom: CustomSection = CustomSection()

    @field_validator("functions", "custom", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def settings(self) -> AutoSwaggerSettings:
        return self.custom.autoswagger
