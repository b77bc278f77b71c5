"""Input actions: named bindings from keys to boolean or vector values."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Union

from .data_types import KeyCode

ActionValue = Union[bool, float, tuple]


class TriggerFlag(IntFlag):
    """Conditions under which a key binding activates its action."""

    NONE = 1 << 0
    KEY_DOWN = 1 << 1
    KEY_UP = 1 << 2
    KEY_HOLD = 1 << 3
    KEY_TAP = 1 << 4
    KEY_MOVE_DOWN = 1 << 5
    KEY_MOVE_UP = 1 << 6
    MOUSE_POSITIVE = 1 << 10
    MOUSE_NEGATIVE = 1 << 11
    MOUSE_POS_AND_NEG = 1 << 12


class ModifierFlag(IntFlag):
    """Transformations applied to the value a key binding produces."""

    NONE = 1 << 0
    NEGATE = 1 << 1
    USE_VEC_NORMAL = 1 << 2
    AXIS_1_NEGATIVE = 1 << 3
    AXIS_2 = 1 << 4
    AXIS_2_NEGATIVE = 1 << 5
    AXIS_3 = 1 << 6
    AXIS_3_NEGATIVE = 1 << 7
    AUTO_RESET = 1 << 8
    AUTO_RESET_ALL = 1 << 9


class ActionType(IntEnum):
    """The kind of value an action produces."""

    BOOLEAN = 0
    VEC_1D = 1
    VEC_2D = 2
    VEC_3D = 3


_ZERO_VALUES: dict[ActionType, ActionValue] = {
    ActionType.BOOLEAN: False,
    ActionType.VEC_1D: 0.0,
    ActionType.VEC_2D: (0.0, 0.0),
    ActionType.VEC_3D: (0.0, 0.0, 0.0),
}


def zero_value(action_type: ActionType) -> ActionValue:
    """Return the neutral value for an action of ``action_type``."""
    return _ZERO_VALUES[ActionType(action_type)]


@dataclass
class KeyBindingDetails:
    """One key bound to an action, with its trigger and modifier flags."""

    key: KeyCode = KeyCode.key_unknown
    trigger_flags: int = 0
    modifier_flags: int = 0
    active: int = 0


@dataclass
class InputAction:
    """An action driven by one or more key bindings."""

    trigger_when_paused: bool = False
    flags: int = 0
    value: ActionType = ActionType.BOOLEAN
    duration_in_sec: float = 0.0
    key_bindings: list[KeyBindingDetails] = field(default_factory=list)
    description: str = ""
    name: str = ""
    data: ActionValue | None = None
    target: ActionValue | None = field(default=None, repr=False)
    time_stamp: float = field(default_factory=time.monotonic, repr=False)

    def __post_init__(self) -> None:
        self.value = ActionType(self.value)
        if self.data is None:
            self.data = zero_value(self.value)
        if self.target is None:
            self.target = zero_value(self.value)

    def __len__(self) -> int:
        return len(self.key_bindings)

    def get_key(self, index: int) -> KeyBindingDetails:
        """Return the binding at ``index``."""
        return self.key_bindings[index]