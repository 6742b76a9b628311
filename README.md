# opscinema

Building blocks for recording operational sessions and turning them into
evidence-backed tutorials, proof bundles and runbooks:

- **Typed contracts** (`opscinema.models`, `opscinema.ipc`): sessions,
  timeline events, OCR blocks, evidence locators, steps and step edits,
  anchors, jobs, exports, verifiers and model profiles, all pydantic models
  with strict field types (unsigned and signed integer ranges, timezone-aware
  datetimes, UUIDs). `opscinema.ipc.IpcCommand` lists the fixed set of 66
  commands that a front end may invoke; `locked_commands()` returns them in
  their fixed order and `IpcCommand.as_str()` gives a command's wire name.
- **Errors** (`opscinema.errors`): `AppError` is an exception that carries an
  `AppErrorCode` (`PERMISSION_DENIED`, `VALIDATION_FAILED`, `CONFLICT`,
  `EXPORT_GATE_FAILED`, ...), a message, optional details, whether it can be
  recovered from, and an optional hint for the user. `to_dict()` and
  `AppError.from_dict()` convert to and from the JSON wire form, leaving out
  absent optional fields.
- **Canonical JSON** (`opscinema.canon_json`): sorted keys, compact
  separators, stable output for hashing. Accepts plain JSON values as well as
  the package's models, enums, UUIDs and datetimes; non-finite floats become
  `null`.
- **Identifiers and hashes** (`opscinema.ids`, `opscinema.hashing`):
  deterministic UUIDv5 evidence ids, and BLAKE3 digests (`blake3_digest`,
  `blake3_hex`) computed in pure Python.
- **Export manifests** (`opscinema.export_manifest`): `ExportManifestV1`,
  the version 1 manifest model with its files, warnings, policy attestations
  and model pins, and `compute_bundle_hash` over the file entries.
- **Verifier contract** (`opscinema.verifier_sdk`): `VerifierCapabilitySpec`
  and `VerifierExecutionResult`.
- **TypeScript client generation** (`opscinema.ipc_client`): a typed client
  with request and response maps for every locked command.
- **Guarded shell verifier** (`opscinema.shell`): runs allow-listed commands
  with a timeout and refuses destructive ones; `file_exists` checks a path.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Canonical JSON

```python
from opscinema.canon_json import to_canonical_json

to_canonical_json({"b": 1, "a": {"d": 2, "c": 1}})
# '{"a":{"c":1,"d":2},"b":1}'
```

## Deterministic evidence ids

The same session, kind and source always give the same evidence id, so
evidence derived again from an event log keeps its identity:

```python
import uuid
from opscinema.ids import deterministic_evidence_id

session_id = uuid.uuid4()
first = deterministic_evidence_id(session_id, "ocr_block", "block-1")
again = deterministic_evidence_id(session_id, "ocr_block", "block-1")
assert first == again
```

## Bundle hashes

```python
from opscinema.export_manifest import compute_bundle_hash

bundle_hash = compute_bundle_hash([
    ("player/index.html", "<blake3 of the file>"),
    ("tutorial.json", "<blake3 of the file>"),
])
```

Each entry contributes `path\nhash\n` and the result is the BLAKE3 hex of
the whole text. Entries are hashed in the order given; pass them sorted by
path.

## Step edits

A step edit is one of `InsertAfterOp`, `UpdateTitleOp`, `ReplaceBodyOp`,
`DeleteOp` or `ReorderOp`, written on the wire as an object with a single
key naming the variant:

```python
import uuid
from opscinema.models import UpdateTitleOp, parse_step_edit_op

op = UpdateTitleOp(step_id=uuid.uuid4(), title="Open billing dashboard")
wire = op.to_json_value()       # {"update_title": {"step_id": "...", "title": "..."}}
assert parse_step_edit_op(wire) == op
```

`parse_step_edit_op` raises `ValueError` for anything that is not exactly
one known variant.

## Running a verifier command

```python
from opscinema.shell import ShellCommandError, run_shell

output = run_shell(["echo"], "echo", ["ok"], 5)

try:
    run_shell(["rm"], "rm", ["-rf", "/tmp/x"], 1)
except ShellCommandError as exc:
    print(exc)  # destructive command is blocked
```

A command must be in the allow-list, the timeout may not exceed 30 seconds,
and commands such as `rm`, `mv`, `dd` or `sudo`, as well as arguments like
`--delete`, `-rf`, `-r`, `-f` or anything under `/dev/`, are rejected before
anything is started (`is_destructive` applies the same check on its own).
Standard error, when not blank, is appended to the output after a
`[stderr]` line. A non-zero exit status, a command that cannot be started,
or a timeout also raises `ShellCommandError`.

## Generating the TypeScript client

```python
from pathlib import Path
from opscinema.ipc_client import generate_typescript_client

Path("generated.ts").write_text(generate_typescript_client())
```

The output is deterministic and uses no `any` types. `command_types(name)`
returns the request and response type text for a single command.

## What this package does not do

It defines the data contracts and the pieces around them, but not the
application that serves them. There is no command-line program, no backend
that answers the `IpcCommand` commands, no storage of sessions, events or
assets, no screen capture, OCR or model runs, and nothing that writes export
bundles to disk or verifies them; those would be built on top of the models,
canonical JSON, hashing and manifest types here. BLAKE3 is implemented in
pure Python, so hashing large files is slow.