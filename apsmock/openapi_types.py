"""Data model for the parts of an OpenAPI 3.0 document the mock server uses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar, Union

T = TypeVar("T")


class HttpMethod(Enum):
    """HTTP methods that routes are generated for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class ParameterLocation(Enum):
    """Where an operation parameter is carried."""

    QUERY = "query"
    PATH = "path"
    HEADER = "header"
    COOKIE = "cookie"


@dataclass
class Info:
    title: str
    version: str
    description: str | None = None


@dataclass
class Server:
    url: str
    description: str | None = None


@dataclass
class Example:
    summary: str | None = None
    description: str | None = None
    value: Any = None


@dataclass
class SchemaRef:
    ref_path: str


@dataclass
class SchemaObject:
    type_name: str | None = None
    format: str | None = None
    items: Schema | None = None
    properties: dict[str, Schema] | None = None
    required: list[str] | None = None
    enum_values: list[Any] | None = None
    example: Any = None


Schema = Union[SchemaRef, SchemaObject]


@dataclass
class MediaType:
    schema: Schema | None = None
    example: Any = None
    examples: dict[str, Example] | None = None


@dataclass
class ResponseRef:
    ref_path: str


@dataclass
class ResponseDefinition:
    description: str
    content: dict[str, MediaType] | None = None


Response = Union[ResponseRef, ResponseDefinition]


@dataclass
class ParameterRef:
    ref_path: str


@dataclass
class ParameterDefinition:
    name: str
    location: ParameterLocation
    required: bool | None = None
    description: str | None = None
    schema: Schema | None = None


Parameter = Union[ParameterRef, ParameterDefinition]


@dataclass
class RequestBody:
    content: dict[str, MediaType]
    required: bool | None = None
    description: str | None = None


@dataclass
class OAuth2Flow:
    scopes: dict[str, str]
    authorization_url: str | None = None
    token_url: str | None = None


@dataclass
class OAuth2Flows:
    authorization_code: OAuth2Flow | None = None
    client_credentials: OAuth2Flow | None = None


@dataclass
class OAuth2Scheme:
    type_name: str
    flows: OAuth2Flows


@dataclass
class ApiKeyScheme:
    type_name: str
    location: str
    name: str


SecurityScheme = Union[OAuth2Scheme, ApiKeyScheme]
SecurityRequirement = dict[str, list[str]]


@dataclass
class Components:
    schemas: dict[str, Schema] | None = None
    responses: dict[str, Response] | None = None
    security_schemes: dict[str, SecurityScheme] | None = None


@dataclass
class Operation:
    responses: dict[str, Response]
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = None
    tags: list[str] | None = None
    security: list[SecurityRequirement] | None = None


@dataclass
class PathItem:
    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None
    patch: Operation | None = None


@dataclass
class OpenApiSpec:
    openapi: str
    info: Info
    paths: dict[str, PathItem] = field(default_factory=dict)
    servers: list[Server] | None = None
    components: Components | None = None


@dataclass
class RouteDefinition:
    """One operation of a specification, ready to be routed."""

    method: HttpMethod
    path: str
    operation: Operation
    path_pattern: str
    components: Components | None = None


# --- conversion from loaded YAML/JSON data -------------------------------


def _mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected a mapping, found {type(value).__name__}")
    return value


def _string(value: Any, where: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{where}: expected a string, found {type(value).__name__}")


def _boolean(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{where}: expected a boolean, found {type(value).__name__}")
    return value


def _any(value: Any, where: str) -> Any:
    return value


def _required(data: dict, key: str, where: str) -> Any:
    value = data.get(key)
    if value is None:
        raise ValueError(f"{where}: missing field `{key}`")
    return value


def _optional(data: dict, key: str, where: str, convert: Callable[[Any, str], T]) -> T | None:
    value = data.get(key)
    return None if value is None else convert(value, f"{where}.{key}")


def _list_of(convert: Callable[[Any, str], T]) -> Callable[[Any, str], list[T]]:
    def parse(value: Any, where: str) -> list[T]:
        if not isinstance(value, list):
            raise ValueError(f"{where}: expected a sequence, found {type(value).__name__}")
        return [convert(item, f"{where}[{index}]") for index, item in enumerate(value)]

    return parse


def _map_of(convert: Callable[[Any, str], T]) -> Callable[[Any, str], dict[str, T]]:
    def parse(value: Any, where: str) -> dict[str, T]:
        return {
            str(key): convert(item, f"{where}.{key}")
            for key, item in _mapping(value, where).items()
        }

    return parse


def _parse_schema(value: Any, where: str) -> Schema:
    data = _mapping(value, where)
    ref = data.get("$ref")
    if isinstance(ref, str):
        return SchemaRef(ref_path=ref)
    return SchemaObject(
        type_name=_optional(data, "type", where, _string),
        format=_optional(data, "format", where, _string),
        items=_optional(data, "items", where, _parse_schema),
        properties=_optional(data, "properties", where, _map_of(_parse_schema)),
        required=_optional(data, "required", where, _list_of(_string)),
        enum_values=_optional(data, "enum_values", where, _list_of(_any)),
        example=data.get("example"),
    )


def _parse_example(value: Any, where: str) -> Example:
    data = _mapping(value, where)
    return Example(
        summary=_optional(data, "summary", where, _string),
        description=_optional(data, "description", where, _string),
        value=data.get("value"),
    )


def _parse_media_type(value: Any, where: str) -> MediaType:
    data = _mapping(value, where)
    return MediaType(
        schema=_optional(data, "schema", where, _parse_schema),
        example=data.get("example"),
        examples=_optional(data, "examples", where, _map_of(_parse_example)),
    )


def _parse_response(value: Any, where: str) -> Response:
    data = _mapping(value, where)
    ref = data.get("$ref")
    if isinstance(ref, str):
        return ResponseRef(ref_path=ref)
    if data.get("description") is None:
        raise ValueError(f"{where}: data did not match any variant of untagged enum Response")
    return ResponseDefinition(
        description=_string(data["description"], f"{where}.description"),
        content=_optional(data, "content", where, _map_of(_parse_media_type)),
    )


def _parse_location(value: Any, where: str) -> ParameterLocation:
    try:
        return ParameterLocation(value)
    except ValueError:
        raise ValueError(f"{where}: unknown parameter location {value!r}") from None


def _parse_parameter(value: Any, where: str) -> Parameter:
    data = _mapping(value, where)
    ref = data.get("$ref")
    if isinstance(ref, str):
        return ParameterRef(ref_path=ref)
    return ParameterDefinition(
        name=_string(_required(data, "name", where), f"{where}.name"),
        location=_parse_location(_required(data, "in", where), f"{where}.in"),
        required=_optional(data, "required", where, _boolean),
        description=_optional(data, "description", where, _string),
        schema=_optional(data, "schema", where, _parse_schema),
    )


def _parse_request_body(value: Any, where: str) -> RequestBody:
    data = _mapping(value, where)
    return RequestBody(
        content=_map_of(_parse_media_type)(_required(data, "content", where), f"{where}.content"),
        required=_optional(data, "required", where, _boolean),
        description=_optional(data, "description", where, _string),
    )


def _parse_flow(value: Any, where: str) -> OAuth2Flow:
    data = _mapping(value, where)
    return OAuth2Flow(
        scopes=_map_of(_string)(_required(data, "scopes", where), f"{where}.scopes"),
        authorization_url=_optional(data, "authorization_url", where, _string),
        token_url=_optional(data, "token_url", where, _string),
    )


def _parse_flows(value: Any, where: str) -> OAuth2Flows:
    data = _mapping(value, where)
    return OAuth2Flows(
        authorization_code=_optional(data, "authorization_code", where, _parse_flow),
        client_credentials=_optional(data, "client_credentials", where, _parse_flow),
    )


def _parse_security_scheme(value: Any, where: str) -> SecurityScheme:
    data = _mapping(value, where)
    try:
        return OAuth2Scheme(
            type_name=_string(_required(data, "type", where), f"{where}.type"),
            flows=_parse_flows(_required(data, "flows", where), f"{where}.flows"),
        )
    except ValueError:
        pass
    try:
        return ApiKeyScheme(
            type_name=_string(_required(data, "type", where), f"{where}.type"),
            location=_string(_required(data, "in", where), f"{where}.in"),
            name=_string(_required(data, "name", where), f"{where}.name"),
        )
    except ValueError:
        raise ValueError(
            f"{where}: data did not match any variant of untagged enum SecurityScheme"
        ) from None


def _parse_components(value: Any, where: str) -> Components:
    data = _mapping(value, where)
    return Components(
        schemas=_optional(data, "schemas", where, _map_of(_parse_schema)),
        responses=_optional(data, "responses", where, _map_of(_parse_response)),
        security_schemes=_optional(
            data, "security_schemes", where, _map_of(_parse_security_scheme)
        ),
    )


def _parse_operation(value: Any, where: str) -> Operation:
    data = _mapping(value, where)
    return Operation(
        responses=_map_of(_parse_response)(
            _required(data, "responses", where), f"{where}.responses"
        ),
        operation_id=_optional(data, "operation_id", where, _string),
        summary=_optional(data, "summary", where, _string),
        description=_optional(data, "description", where, _string),
        parameters=_optional(data, "parameters", where, _list_of(_parse_parameter)),
        request_body=_optional(data, "request_body", where, _parse_request_body),
        tags=_optional(data, "tags", where, _list_of(_string)),
        security=_optional(data, "security", where, _list_of(_map_of(_list_of(_string)))),
    )


def _parse_path_item(value: Any, where: str) -> PathItem:
    data = _mapping(value, where)
    return PathItem(
        **{
            method.value.lower(): _optional(data, method.value.lower(), where, _parse_operation)
            for method in HttpMethod
        }
    )


def _parse_server(value: Any, where: str) -> Server:
    data = _mapping(value, where)
    return Server(
        url=_string(_required(data, "url", where), f"{where}.url"),
        description=_optional(data, "description", where, _string),
    )


def _parse_info(value: Any, where: str) -> Info:
    data = _mapping(value, where)
    return Info(
        title=_string(_required(data, "title", where), f"{where}.title"),
        version=_string(_required(data, "version", where), f"{where}.version"),
        description=_optional(data, "description", where, _string),
    )


def spec_from_dict(data: Any) -> OpenApiSpec:
    """Build a specification from loaded YAML or JSON data.

    Raises ValueError when the data does not have the expected shape.
    """
    where = "spec"
    document = _mapping(data, where)
    return OpenApiSpec(
        openapi=_string(_required(document, "openapi", where), f"{where}.openapi"),
        info=_parse_info(_required(document, "info", where), f"{where}.info"),
        paths=_map_of(_parse_path_item)(_required(document, "paths", where), f"{where}.paths"),
        servers=_optional(document, "servers", where, _list_of(_parse_server)),
        components=_optional(document, "components", where, _parse_components),
    )