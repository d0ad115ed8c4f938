# samlib

Pieces for building a shell alias manager on top of plain files and your shell.
Nothing outside the standard library is needed.

## What is inside

- `samlib.fsutils` – `TempFile` and `TempDirectory` (both usable as context
  managers, removed by `cleanup()`), `walk_dir`, `replace_home_variable` and the
  `ensure_exists`, `ensure_is_directory`, `ensure_is_file` and
  `ensure_sufficient_permissions` checks, which raise subclasses of `FSError`.
- `samlib.associative_state` – `AssociativeState`, a key/value store kept as JSON
  in a file. With a `ttl`, expired entries read as absent and are purged on the
  next `put`. Optional `encode`/`decode` callables convert values to and from
  JSON-compatible data. Failures raise `AssociativeStateError`.
- `samlib.sequential_state` – `SequentialState`, an append-only list kept as JSON
  in a file, optionally capped by `max_size` (the oldest entry is dropped). It has
  `push`, `first`, `last`, `entries` and `delete(position)`, which raises
  `IndexError` for a position that does not exist.
- `samlib.vars_cache` – the `VarsCache` interface; `FileVarsCache` stores command
  output in a file for a time-to-live and offers `entries`, `delete` and
  `clear_cache`; `NoopVarsCache` stores nothing. Failures raise `CacheError`.
- `samlib.processes` – `ShellCommand` runs a command through `$SHELL` (or
  `/bin/sh`) with `run(env, cwd)`, and `replace_env_vars_in_command` expands
  `$VAR` and `${VAR}` references from the environment plus given variables.
- `samlib.tmux` – `Tmux` lists a session's windows, runs a command in a new pane
  (creating the window if it is missing) and sets a `WindowLayout`. It calls the
  `tmux` program, which must be installed; `NoTmuxError` is raised when there is
  no current session.
- `samlib.events`, `samlib.list_state`, `samlib.options_state`,
  `samlib.view_state` – the state machine behind the picker: ordered,
  case-insensitive fuzzy filtering (`has_match`), navigation, marking and option
  toggles. `MockValue` is a ready-made `Value`.
- `samlib.modal_ui` and `samlib.modal_view` – the terminal picker. `ModalView.run()`
  takes over the terminal; `ModalView.run_with_keys(keys)` drives it from any
  sequence of key strings.

## Installing

```
pip install .
```

## Examples

Cache a command's output for ninety seconds:

```python
from samlib.vars_cache import FileVarsCache

cache = FileVarsCache("/tmp/vars-cache", ttl=90)
cache.put("branch", "git branch", "main\ndev\n")
print(cache.get("git branch"))
```

Keep the last hundred entries of a history:

```python
from samlib.sequential_state import SequentialState

history = SequentialState("/tmp/history", max_size=100)
history.push({"command": "ls -l"})
print(history.last())
```

Expand variables in a command:

```python
from samlib.processes import ShellCommand

print(ShellCommand("echo ${GREETING}").replace_env_vars_in_command({"GREETING": "hi"}).command)
```

Drive the picker state without a terminal:

```python
from samlib.events import Event, EventKind, MockValue, input_char
from samlib.view_state import ViewState

state = ViewState([MockValue(1, "elem 1"), MockValue(2, "elem 2")], [])
state.update(input_char("2"))
state.update(Event(EventKind.ENTR))
print(state.response().marked_values)
```

## Trying the picker

A demonstration picker with ninety-nine entries and two options:

```
samlib-picker
```

Type to filter and Backspace to undo, use the arrow keys or Ctrl-P / Ctrl-N to
move, Ctrl-S to mark an entry, Ctrl-A to mark every visible entry, Esc to switch
to the options screen (where typing an option's key toggles it), Enter to confirm
and Ctrl-C to leave without a choice. The chosen response is printed. The picker
needs a POSIX terminal.

## What is not here

The package does not read alias or variable definition files, does not resolve
an alias into commands, and has no alias history or session storage of its own;
the stores, cache, shell helpers and picker are the building blocks for that.

## Running the tests

```
pip install ".[test]"
pytest
```