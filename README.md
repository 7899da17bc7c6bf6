# shoehorn-tools

Building blocks for tooling around the Shoehorn platform: resolving and
checking credentials, working out what applying a manifest would change,
placing conversion output safely, preparing forge workflow inputs, running
CI quality checks and gathering addon files for publishing. Everything is
plain Python with no third-party dependencies.

## Install

```
pip install .
```

With the test extra, the test suite runs under pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `shoehorn_tools.auth`

- `resolve_token(flag_value)` returns `(token, source)`. An explicit value
  wins (`"flag"`); otherwise the file named by `SHOEHORN_TOKEN_FILE` is read
  and stripped of surrounding whitespace (`"file"`); otherwise
  `SHOEHORN_TOKEN` is used (`"env"`); with none of them it returns
  `("", "none")`. A configured token file that is missing, is a directory,
  is larger than 64 KiB or is empty raises `AuthError`.
- `normalize_server_url(url)` adds `https://` to a URL without an HTTP(S)
  scheme and strips trailing slashes. `has_scheme(raw_url)` tells whether a
  URL starts with `http://` or `https://`.
- `validate_server_security(server_url)` accepts an empty URL, any `https`
  URL, and `http` to `localhost`, `127.0.0.1` or `::1`. Plaintext HTTP to
  any other host, or any other scheme, raises `AuthError`.
- `format_duration(delta)` renders a `timedelta` as whole seconds, minutes,
  hours or days, e.g. `"2 hours"`.

```python
from shoehorn_tools.auth import normalize_server_url, validate_server_security

url = normalize_server_url("api.example.com/")   # "https://api.example.com"
validate_server_security(url)                    # passes: HTTPS
```

### `shoehorn_tools.publish`

- `read_manifest(directory)` loads `manifest.json` from the directory (the
  current directory by default) as a JSON object. A missing file, a file
  over 2 MB, invalid JSON or a value that is not an object raises
  `PublishError`.
- `collect_bundles(directory)` returns a mapping with `"backend"`
  (`dist/addon.js`) and `"frontend"` (`dist/frontend.js`) contents for
  whichever of them exist; a bundle over 2 MB raises `PublishError`.

### `shoehorn_tools.paths`

- `validate_output_path(output_path, base_dir)` raises `PathTraversalError`
  unless the path is the base directory or lies beneath it.
- `iter_yaml_files(directory)` yields every `.yaml` and `.yml` file below a
  directory, in lexical order.
- `output_path_for(path, input_dir, output_dir)` mirrors a file's place
  under `input_dir` beneath `output_dir`, returns `None` when no output
  directory is given, and raises `PathTraversalError` if the result escapes.
- `read_limited(path, limit)` reads a file, or standard input when `path` is
  `"-"`, raising `InputTooLargeError` past `limit` bytes (10 MB by default).

### `shoehorn_tools.diff`

`Resource` (a local manifest), `RemoteEntity` (the remote catalog fields)
and `DiffEntry` (the outcome) are dataclasses. `diff_resource(local, remote)`
returns a `"create"` entry when `remote` is `None`, otherwise an `"update"`
entry listing name, type, description or tag changes, or `"unchanged"`.
`summarize(entries)` returns `(to_create, to_update, unchanged)`;
`render_entries(entries)` produces the plain-text listing with a summary
line; `DiffEntry.as_dict()` gives a mapping for JSON or YAML output.

### `shoehorn_tools.forge_inputs`

- `build_inputs(inputs_json, kv_pairs)` merges a JSON object with
  `key=value` pairs, the pairs overriding JSON keys. Bad JSON or a pair
  without `=` raises `InputError`.
- `coerce_input_types(inputs, schema)` converts string values in place to
  the `boolean`, `number` or `integer` type a `MoldInput` declares, leaving
  unparsable values alone.
- `fill_defaults(inputs, schema)` sets non-empty defaults for missing inputs;
  `missing_required(inputs, schema)` lists required inputs still absent.
- `resolve_action(flag, actions)` picks the explicit action, else the
  primary `MoldAction`, else the first, else `""`.

### `shoehorn_tools.forge_status`

`is_terminal_status(status)` is true for `completed`, `failed`, `cancelled`
and `rolled_back`. `format_status(status)` prefixes a two-character icon,
`truncate_id(run_id)` keeps the first twelve characters, and
`shorten_description(text)` cuts at fifty characters with `...`.

### `shoehorn_tools.check`

- `evaluate_scorecard(entity_id, score, max_score, grade, min_score)`
  returns a result mapping whose `"pass"` is `score >= min_score`.
- `evaluate_entity(entity_id, owner, links, has_owner, has_docs)` runs the
  requested owner and documentation checks and returns an `EntityReport`
  (`passed`, `as_dict()`, `lines()` with `PASS:`/`FAIL:` lines). Asking for
  neither check raises `CheckError`.

## What this package does not do

It has no command-line program, no HTTP client for the Shoehorn API, no
stored configuration or login profiles, no manifest YAML parser and no
build or development runner for addons. It provides the checks, file
handling and formatting that such tooling relies on; talking to a server and
presenting output is left to the caller.