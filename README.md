# apsmock

Mock building blocks for Autodesk Platform Services (APS) APIs.

`apsmock` reads OpenAPI 3.0 specifications, turns their paths into route
definitions, and builds mock responses from the examples they contain. For
tests that need behaviour rather than fixed examples, it also keeps in-memory
state for common APS resources: OSS buckets and objects, Data Management hubs
and projects, Model Derivative translation jobs, ACC issues and webhook
subscriptions.

## Configuration

`apsmock.config` holds the settings and the package's error type.

```python
from apsmock.config import MockMode, MockServerConfig, parse_mode

config = MockServerConfig()              # stateful, specs in ../aps-sdk-openapi,
                                         # host 0.0.0.0, port 3000
mode = parse_mode("Stateless")           # case-insensitive: MockMode.STATELESS
config = MockServerConfig(mode="stateless", openapi_dir="specs")
```

`parse_mode` raises `ValueError` for a name other than `stateless` or
`stateful`. `MockServerConfig` accepts a mode name as a string and turns
`openapi_dir` and `state_file` into `Path` objects.

`MockError` is raised when a specification file cannot be read or parsed.

## Reading OpenAPI specifications

```python
from apsmock.parser import parse_directory, parse_file, extract_routes, convert_path_to_pattern

for name, spec in parse_directory("specs"):
    for route in extract_routes(spec):
        print(route.method.value, route.path, route.path_pattern)

convert_path_to_pattern("/buckets/{bucketKey}")   # "/buckets/:bucket_key"
```

- `parse_directory` walks the directory recursively, in sorted order, and
  reads `.yaml`, `.yml` and `.json` files. Each spec is named after its path
  relative to the directory, with `/` separators and without the extension.
  Files that fail to parse are logged and skipped; a directory that does not
  exist yields an empty list.
- `parse_file` parses one file and raises `MockError` if it cannot be read,
  is not valid YAML/JSON, or does not have the shape of a specification.
  Dates and timestamps in the file are kept as strings.
- `extract_routes` returns a `RouteDefinition` for each GET, POST, PUT,
  DELETE and PATCH operation of each path, carrying the spec's components.
- `convert_path_to_pattern` rewrites `{paramName}` placeholders as
  `:param_name`.

The data model lives in `apsmock.openapi_types` (`OpenApiSpec`, `PathItem`,
`Operation`, `ResponseDefinition`, `ResponseRef`, `MediaType`,
`SchemaObject`, `SchemaRef`, `Components`, `HttpMethod` and others).
`spec_from_dict` builds an `OpenApiSpec` from already loaded data and raises
`ValueError` when the data has the wrong shape.

## Building example responses

`GenericHandler` takes a route definition and returns a `MockResponse`
(`status`, `body`, and `content_type`, which is `application/json` when there
is a body).

```python
from apsmock.generic import GenericHandler

response = GenericHandler(route).handle()
print(response.status, response.body)
```

The handler looks at the operation's responses `200`, `201`, `202`, `204`
and `default`, in that order, resolving `$ref` references against the
components. For the first one that resolves, it checks the
`application/json` and then `application/vnd.api+json` media types and takes
the media type's `example`, else the value of its first `examples` entry,
else the `example` of its (resolved) schema. A found example is returned
with status 200. Without one, the reply is 204 with no body for `204`, and
200 with no body otherwise. If none of those responses exists, the reply is
501 with a JSON body holding `message` and `operation_id`.

Hand-written handlers can be kept in a `CustomHandlerRegistry`, keyed by any
route string you choose. A handler receives a request body (or `None`) and
returns a `MockResponse`.

```python
from apsmock.custom import CustomHandlerRegistry
from apsmock.generic import MockResponse

registry = CustomHandlerRegistry()
registry.register("GET /hello", lambda body: MockResponse(200, {"message": "hi"}))
registry.has("GET /hello")        # True; "GET /hello" in registry works too
handler = registry.get("GET /hello")
```

## In-memory state

`apsmock.manager.StateManager` holds one store per resource kind:
`buckets`, `objects`, `projects`, `translations`, `issues` and `webhooks`.
The stores can also be used on their own. They are safe to use from several
threads, and every read returns copies, so changing a returned record does
not change the store.

```python
from apsmock.manager import StateManager
from apsmock.translations import TranslationStatus
from apsmock.webhooks import WebhookScope

state = StateManager()

state.buckets.create_bucket("my-bucket", "transient")
state.buckets.get_bucket("my-bucket").bucket_owner       # "mock-owner"

info = state.objects.upload_object("my-bucket", "model.rvt", 1024, None)
info.object_id      # "urn:adsk.objects:os.object:my-bucket/model.rvt"
info.content_type   # "application/octet-stream"

state.translations.create_job("dXJuOmV4YW1wbGU")
state.translations.simulate_progress("dXJuOmV4YW1wbGU")

issue = state.issues.create_issue("b.default-project", "Leak in level 2", None)
state.issues.update_issue_status("b.default-project", issue.id, "closed")

hook = state.webhooks.create_subscription(
    "tenant-1", "http://localhost:8080/callback", WebhookScope(folder="folder-1")
)
```

- **Buckets** (`BucketState`): `create_bucket` replaces a bucket with the
  same key and stamps `created_date` in milliseconds; `get_bucket`,
  `list_buckets`, `delete_bucket` (returns whether it existed).
- **Objects** (`ObjectState`): objects are grouped by bucket key.
  `upload_object` gives each object a `sha1_<uuid>` hash and a location under
  the OSS bucket objects path; `get_object`, `list_objects` (empty for an
  unknown bucket), `delete_object`.
- **Projects** (`ProjectState`): starts with one hub, `b.default-hub`
  ("Default Hub", region `US`), holding one project, `b.default-project`.
  `list_hubs`, `get_hub`, `list_projects`, `get_project`.
- **Translations** (`TranslationState`): `create_job` starts a `pending` job
  at `0%`. `simulate_progress` moves a pending job to `inprogress` at `25%`,
  adds 25 points to an in-progress job below 100%, and marks a job at 100%
  or more as `success` with progress `complete`; succeeded and failed jobs
  are left alone. `update_job_status` sets status and progress and returns
  whether the job exists.
- **Issues** (`IssuesState`): issues are grouped by project, get random UUID
  ids and start as `open`. `get_issue`, `list_issues`, `update_issue_status`.
- **Webhooks** (`WebhooksState`): subscriptions get random UUID hook ids and
  start as `active`. `get_subscription`, `list_subscriptions`,
  `delete_subscription`.

## What the package does not do

- It does not run an HTTP server and has no command-line program. It builds
  route definitions and `MockResponse` values; serving them over HTTP is left
  to your own application or test harness. The `host`, `port` and `verbose`
  settings of `MockServerConfig` are only stored.
- It does not check `Authorization` headers or issue access tokens, and
  `StateManager` has no token store.
- It does not save or load state: `MockServerConfig.state_file` is kept as a
  setting, but nothing reads or writes it. All state lives in memory only.