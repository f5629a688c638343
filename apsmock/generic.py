"""Serving canned responses taken from an operation's OpenAPI definition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from apsmock.openapi_types import (
    MediaType,
    Response,
    ResponseDefinition,
    RouteDefinition,
    Schema,
    SchemaObject,
    SchemaRef,
)

logger = logging.getLogger(__name__)

_SUCCESS_CODES = ("200", "201", "202", "204", "default")
_MEDIA_TYPES = ("application/json", "application/vnd.api+json")


@dataclass(frozen=True)
class MockResponse:
    """A status code with an optional JSON body."""

    status: int
    body: Any = None

    @property
    def content_type(self) -> str | None:
        """The media type of the body, or None when there is no body."""
        return None if self.body is None else "application/json"


class GenericHandler:
    """Answers a route with the first example its definition provides."""

    def __init__(self, route: RouteDefinition) -> None:
        self.route = route

    def handle(self) -> MockResponse:
        """Build the mock response for the route."""
        route = self.route
        logger.info("GenericHandler handling %s %s", route.method.value, route.path)

        for code in _SUCCESS_CODES:
            response = route.operation.responses.get(code)
            if response is None:
                continue
            resolved = self._resolve_response(response)
            if resolved is None:
                continue
            if isinstance(resolved, ResponseDefinition) and resolved.content:
                for media_name in _MEDIA_TYPES:
                    media_type = resolved.content.get(media_name)
                    if media_type is None:
                        continue
                    example = self._extract_example(media_type)
                    if example is not None:
                        return MockResponse(HTTPStatus.OK, example)
            if code == "204":
                return MockResponse(HTTPStatus.NO_CONTENT)
            return MockResponse(HTTPStatus.OK)

        return MockResponse(
            HTTPStatus.NOT_IMPLEMENTED,
            {
                "message": (
                    f"No example response available for {route.method.value} {route.path}"
                ),
                "operation_id": route.operation.operation_id,
            },
        )

    def _resolve_response(self, response: Response) -> Response | None:
        if isinstance(response, ResponseDefinition):
            return response
        name = response.ref_path.split("/")[-1]
        components = self.route.components
        if components is None or components.responses is None:
            return None
        return components.responses.get(name)

    def _extract_example(self, media_type: MediaType) -> Any:
        if media_type.example is not None:
            return media_type.example

        if media_type.examples:
            first = next(iter(media_type.examples.values()))
            if first.value is not None:
                return first.value

        if media_type.schema is not None:
            schema = self._resolve_schema(media_type.schema)
            if isinstance(schema, SchemaObject) and schema.example is not None:
                return schema.example
        return None

    def _resolve_schema(self, schema: Schema) -> Schema | None:
        if not isinstance(schema, SchemaRef):
            return schema
        name = schema.ref_path.split("/")[-1]
        components = self.route.components
        if components is None or components.schemas is None:
            return None
        return components.schemas.get(name)