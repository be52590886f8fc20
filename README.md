# notekeeper

A small note-keeping backend organised in layers:

- `notekeeper.config` – loads the application configuration from YAML.
- `notekeeper.domain` – the `Note` and `CreateNoteDto` data classes.
- `notekeeper.errors` – the error classes and their mapping onto HTTP
  statuses and JSON error bodies.
- `notekeeper.services` – the `NoteRepository` protocol and the use cases
  (`CreateNoteService`, `GetNoteService`, `NoteDelegate`).
- `notekeeper.presenters` – conversion between request/response bodies and
  domain objects.
- `notekeeper.web` – `NoteController` and `Response`, which turn requests
  into JSON-ready responses without depending on any web framework.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`notekeeper.config.load_config(environ=None)` reads a YAML file. It looks up
`CONFIG_PATH` and `APP_PROFILE` in `environ`, or in `os.environ` when no
mapping is given. If `CONFIG_PATH` is empty and `APP_PROFILE` is `local`,
the path `configs/local.yaml` is used. `APP_PROFILE` must always be set. A
missing path, a missing profile, a file that does not exist, or a file that
cannot be read or parsed raises `ConfigError`.

```yaml
server:
  port: "8080"
  name: Notes
database:
  host: localhost
  userName: user
  password: password
  dataBaseName: notes
  dialect: postgres
  port: "5432"
```

```python
from notekeeper.config import load_config

config = load_config({"CONFIG_PATH": "configs/local.yaml", "APP_PROFILE": "local"})
print(config.server.name, config.database.host)
```

The result is a frozen `AppConfig` holding a `ServerConfig` (`port`, `name`)
and a `DatabaseConfig` (`host`, `username`, `password`, `database_name`,
`dialect`, `port`). Every value is kept as a string; missing keys become
empty strings. `AppConfig.from_mapping(data)` builds the same object from an
already parsed mapping.

## Repositories

The services work against any object that satisfies the `NoteRepository`
protocol:

- `save(dto)` stores a `CreateNoteDto` and returns the stored `Note`;
- `get_note_by_id(note_id)` returns a `Note`.

A repository reports failures by raising `RepositoryError(action, err)`. For
a lookup of a note that does not exist, `err` should be a `LookupError`;
`GetNoteService` then turns it into a `RowNotFoundError`.

## Controllers

```python
from notekeeper.web import NoteController

controller = NoteController(my_repository)

response = controller.save_note(b'{"name": "Docs", "link": "docs/index"}', "/notes")
print(response.status, response.body)

response = controller.get_note_by_id(1, "/notes/1")
print(response.json())
```

`save_note(body, path)` decodes the JSON body with `parse_json_body`; the
body must be a JSON object whose `name`, `link` and `description`, when
present and not null, are strings. Missing fields become empty strings.

Each `Response` holds `status`, a JSON-ready `body` and `headers`
(`Content-Type: application/json`); `Response.json()` serialises the body.
A success body has a `payload` (`description`, `id`, `link`, `name`) and a
`meta` block with the request `path` and a `timestamp`. An error body has
`description`, `errorCode` and `meta`. The statuses are:

- 200 on success;
- 404 when a note is not found (`RowNotFoundError`);
- 400 for malformed request bodies and validation failures (`MarshallError`,
  `ValidationError`);
- 500 for anything else, with a generic message.

`handle_response(path, logic, present)` is the general helper behind this:
it calls `logic()`, and either presents the result with status 200 or turns
the raised error into an error response. The mapping itself is available as
`notekeeper.errors.error_status(err)` and
`notekeeper.errors.error_response(message, status, path)`.

## What this package does not do

- It does not run an HTTP server or register routes; you call
  `NoteController` from whatever web framework or server you use, and send
  its `Response` yourself.
- It does not store notes. There is no database-backed `NoteRepository`;
  you provide your own implementation.
- It does not serve API documentation pages or an API specification file.