from apsmock.custom import CustomHandlerRegistry
from apsmock.generic import MockResponse


def _echo(body):
    return MockResponse(200, body)


def test_registered_handler_is_found_and_called():
    registry = CustomHandlerRegistry()
    registry.register("GET /hello", _echo)
    assert registry.has("GET /hello")
    assert "GET /hello" in registry
    handler = registry.get("GET /hello")
    assert handler is _echo
    assert handler({"a": 1}) == MockResponse(200, {"a": 1})


def test_unknown_route_is_absent():
    registry = CustomHandlerRegistry()
    assert not registry.has("GET /missing")
    assert registry.get("GET /missing") is None
    assert "GET /missing" not in registry


def test_register_replaces_previous_handler():
    registry = CustomHandlerRegistry()
    registry.register("POST /x", _echo)

    def other(body):
        return MockResponse(204)

    registry.register("POST /x", other)
    assert registry.get("POST /x") is other
    assert registry.get("POST /x")(None).status == 204


def test_keys_are_exact():
    registry = CustomHandlerRegistry()
    registry.register("GET /a", _echo)
    assert not registry.has("get /a")
    assert not registry.has("GET /a/")