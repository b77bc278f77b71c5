# gluttony

Core building blocks for a small game or application engine.

- `gluttony.data_types`: `KeyCode`, `KeyState`, `SystemState`, `ErrorCode`,
  `DurationPrecision`, `Extent3D`, `Version` and `SystemTime`. It also holds the
  directory and file-extension constants (`CONFIG_DIR`, `FILE_EXTENSION_CONFIG`, ...).
- `gluttony.unique_id`: `UUID`, an unsigned 64-bit identifier. It is random
  unless you give it a value. It can be hashed, compares equal to its integer
  value, and works wherever an `int` index is expected.
- `gluttony.text_utils`: string helpers (`extract_variable_name`,
  `add_spaces`, `measure_indentation`, `count_lines`, `remove_substring`,
  `str_to_num`, ...). It also has `to_string` / `from_string`, which give the
  text form of values in config files.
- `gluttony.input_action`: `InputAction`, `KeyBindingDetails`, `TriggerFlag`,
  `ModifierFlag`, `ActionType` and `zero_value`.
- `gluttony.input_mapping`: `InputMapping`, which registers input actions and
  keeps their settings in a YAML file. It also has `key_code_to_string`,
  `string_to_key_code` and `input_config_path`.
- `gluttony.layers`: `Layer` and `LayerStack`. Regular layers always stay below
  overlays.
- `gluttony.file_watcher`: `FileWatcherSystem`, which watches a directory with
  debouncing, plus `should_ignore_file`, `NotifyFilter` and `FileAction`.
- `gluttony.crash_handler`: `attach_crash_handler`, `detach_crash_handler` and
  `handled_signals`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Versions, timestamps and key codes

```python
from gluttony.data_types import KeyCode, SystemTime, Version
from gluttony.input_mapping import key_code_to_string, string_to_key_code

print(Version(1, 2, 3).to_str())          # "1:2:3"
print(key_code_to_string(KeyCode.key_A))  # "key_A"
print(key_code_to_string(999))            # "Unknown"
print(string_to_key_code("key_space"))    # KeyCode.key_space
print(string_to_key_code("nonsense"))     # KeyCode.key_unknown

t = SystemTime(2025, 3, 14, 5, 9, 26, 53, 589)
print(t.to_str())                         # "2025-03-14 (5) 09:26:53.589"
```

Some key codes are aliases. `mouse_bu_left` is `mouse_bu_1`, `mouse_bu_right`
is `mouse_bu_2`, `mouse_bu_middle` is `mouse_bu_3`, and `mouse_bu_last` is
`mouse_bu_8`. For that reason they serialize under the numbered name.

`SystemTime` ordering ignores `day_of_week`, but equality takes it into account.

### Text conversion

```python
from pathlib import Path
from gluttony.data_types import Version
from gluttony.text_utils import extract_variable_name, from_string, to_string

extract_variable_name("player->camera.fov")   # "fov"
to_string(True)                               # "true"
to_string(Version(1, 2, 3))                   # "1 2 3"
to_string((1.0, 0.5, 0.25, 1.0))              # "1.0000 0.5000 0.2500 1.0000"
to_string("two\nlines")                       # "two$lines"
from_string("1 2 3", Version)                 # Version(1, 2, 3)
from_string("0.5 1 2", tuple)                 # (0.5, 1.0, 2.0)
from_string("two$lines", str)                 # "two\nlines"
```

If `to_string` gets a value it does not support, it raises `TypeError`. The same
happens when `from_string` is given a type it does not support.

### Input actions

```python
from gluttony.data_types import KeyCode
from gluttony.input_action import ActionType, InputAction, KeyBindingDetails, TriggerFlag
from gluttony.input_mapping import InputMapping

jump = InputAction(
    name="jump",
    value=ActionType.BOOLEAN,
    key_bindings=[KeyBindingDetails(KeyCode.key_space, TriggerFlag.KEY_MOVE_DOWN)],
)

mapping = InputMapping("my_project")
mapping.register_action(jump)        # loads saved settings, or writes the defaults
for action in mapping:
    print(action.name, len(action))  # "jump 1"
```

Settings are stored in `<project>/config/input.yml` (see `input_config_path`),
with one section per action name. `register_action` works as follows:

- If the action already has a section, its settings are loaded from the file.
- If the action has no section, or `force_override=True` is passed, its current
  settings are written to the file.
- If the action has no name, `ValueError` is raised.

To use a different project directory for one action, pass it as the `path`
argument.

### Layers

```python
from gluttony.layers import Layer, LayerStack

stack = LayerStack()
world, ui = Layer("world"), Layer("ui")
stack.push_overlay(ui)
stack.push_layer(world)       # inserted before the overlay
print(list(stack))            # [Layer('world'), Layer('ui')]
for layer in stack:
    layer.on_update(0.016)
print(world.frame_count, world.enabled)   # 1 True
```

The base `Layer` hooks do some simple bookkeeping:

- `on_attach` and `on_detach` toggle `enabled`.
- `on_update` adds to `elapsed_time` and `frame_count`.
- `on_event` and `on_imgui_render` count calls.

Subclasses override the hooks they need. `delete_all_layers` clears the stack
and does not call `on_detach`.

### Watching a directory

```python
from gluttony.file_watcher import FileWatcherSystem

with FileWatcherSystem(
    "src",
    include_sub_directories=True,
    on_changed=lambda path: print("changed", path),
    on_created=lambda path: print("created", path),
    on_deleted=lambda path: print("deleted", path),
    compile=lambda: print("rebuilding"),
) as watcher:
    ...
```

The watcher works as follows:

- `compile` is called once when watching starts.
- It is called again after each batch that reported a change.
- Changes to the same file within `debounce_time` seconds (default 0.1) collapse into the latest one.
- A move is reported as a deletion of the old name plus a creation of the new one.
- Directory events are ignored.
- Some file names are skipped: hidden files, `*~`, `*.tmp`, `*.TMP`, `*.temp`, `*.swp`, `*.bak` and similar temporary names. `should_ignore_file` tells you whether a given name is skipped.

`start` raises in these cases:

- `ValueError` if no path is set.
- `FileNotFoundError` if the path is not a directory.
- `RuntimeError` if the watcher is already running.

You can also call `process_event` and `dispatch_pending` yourself to feed and
flush changes.

### Crash handling

```python
from gluttony.crash_handler import attach_crash_handler, detach_crash_handler, handled_signals

print(handled_signals())   # the terminating signals this platform knows
attach_crash_handler(lambda signum: print("caught", signum))
# ...
detach_crash_handler()
```

`attach_crash_handler` installs a one-shot handler on every signal that still
has its default action. It must be called from the main thread. When a signal
arrives:

1. The default action for that signal is restored.
2. The callback runs. By default it prints a message, logs it at critical level
   and calls `logging.shutdown()`.

`detach_crash_handler` puts back the handlers that were in place before.

## What this package does not do

This package is a set of building blocks. It contains none of the following:

- an application loop or window;
- a renderer;
- a user-interface layer;
- an event system.

`InputMapping` stores and loads action settings, but it does not read devices.
Nothing here evaluates triggers or modifiers against key presses; `TriggerFlag`
and `ModifierFlag` only describe them. `FileWatcherSystem` reports changes, and
any rebuilding is left to the `compile` callback you supply.