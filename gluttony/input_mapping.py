"""Registry of input actions, with their settings kept in a YAML config file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from .data_types import CONFIG_DIR, FILE_EXTENSION_CONFIG, KeyCode
from .input_action import ActionType, InputAction, KeyBindingDetails
from .text_utils import bool_to_str, from_string, to_string

_NAME_TO_CODE: dict[str, KeyCode] = {member.name: member for member in KeyCode}


def key_code_to_string(code: int) -> str:
    """Return the serialized name of a key code, or ``"Unknown"``."""
    try:
        return KeyCode(code).name
    except ValueError:
        return "Unknown"


def string_to_key_code(text: str) -> KeyCode:
    """Return the key code with the serialized name ``text``, or ``key_unknown``."""
    return _NAME_TO_CODE.get(text, KeyCode.key_unknown)


def input_config_path(base: str | Path) -> Path:
    """Return the input config file below the project directory ``base``."""
    return Path(base) / CONFIG_DIR / f"input{FILE_EXTENSION_CONFIG}"


def _text(raw: Any) -> str:
    if isinstance(raw, bool):
        return bool_to_str(raw)
    return str(raw)


def _read_document(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as stream:
        loaded = yaml.safe_load(stream)
    return loaded if isinstance(loaded, dict) else {}


def _write_document(path: Path, document: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        yaml.safe_dump(document, stream, sort_keys=False)


def _dump_action(action: InputAction) -> dict[str, Any]:
    bindings = []
    for binding in action.key_bindings:
        key_name = key_code_to_string(binding.key)
        binding.key = string_to_key_code(key_name)
        bindings.append({
            "key_name": key_name,
            "trigger_flags": to_string(int(binding.trigger_flags)),
            "modefier_flags": to_string(int(binding.modifier_flags)),
        })
    return {
        "triger_when_paused": to_string(action.trigger_when_paused),
        "duration_in_sec": to_string(float(action.duration_in_sec)),
        "value": to_string(action.value),
        "keys_bindings": bindings,
    }


def _load_binding(entry: dict[str, Any]) -> KeyBindingDetails:
    binding = KeyBindingDetails()
    if "key_name" in entry:
        binding.key = string_to_key_code(_text(entry["key_name"]))
    if "trigger_flags" in entry:
        binding.trigger_flags = from_string(_text(entry["trigger_flags"]), int)
    if "modefier_flags" in entry:
        binding.modifier_flags = from_string(_text(entry["modefier_flags"]), int)
    return binding


def _load_action(action: InputAction, section: dict[str, Any]) -> None:
    if "triger_when_paused" in section:
        action.trigger_when_paused = from_string(_text(section["triger_when_paused"]), bool)
    if "duration_in_sec" in section:
        action.duration_in_sec = from_string(_text(section["duration_in_sec"]), float)
    if "value" in section:
        action.value = from_string(_text(section["value"]), ActionType)
    bindings = section.get("keys_bindings")
    if isinstance(bindings, list):
        action.key_bindings = [
            _load_binding(entry) for entry in bindings if isinstance(entry, dict)
        ]


class InputMapping:
    """Holds the registered input actions of a project."""

    def __init__(self, project_path: str | Path | None = None) -> None:
        self.project_path = Path(project_path) if project_path is not None else Path.cwd()
        self._actions: list[InputAction] = []

    def _serialize_action(self, action: InputAction, force_override: bool, path: Path) -> None:
        if not action.name:
            raise ValueError("an input action needs a name before it can be registered")
        config_file = input_config_path(path)
        document = _read_document(config_file)
        section = document.get(action.name)
        if force_override or not isinstance(section, dict):
            document[action.name] = _dump_action(action)
            _write_document(config_file, document)
        else:
            _load_action(action, section)

    def register_action(
        self,
        action: InputAction,
        force_override: bool = False,
        path: str | Path | None = None,
    ) -> None:
        """Register ``action``, loading its settings from the config file.

        With ``force_override`` the action's current settings are written to
        the file instead. An action missing from the file is written with its
        defaults.
        """
        base = Path(path) if path is not None else self.project_path
        self._serialize_action(action, force_override, base)
        self._actions.append(action)

    def get_action(self, index: int) -> InputAction:
        """Return the action registered at ``index``."""
        return self._actions[index]

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[InputAction]:
        return iter(self._actions)