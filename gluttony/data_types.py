"""Core value types shared across the engine: key codes, states, versions and timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

ASSET_EXTENSION = ".GLTasset"
PROJECT_EXTENSION = ".GLTproj"
PROJECT_TEMP_DLL_PATH = "_build_DLL"

METADATA_DIR = "metadata"
CONFIG_DIR = "config"
CONTENT_DIR = "content"
SOURCE_DIR = "src"

FILE_EXTENSION_CONFIG = ".yml"
FILE_EXTENSION_INI = ".ini"


class DurationPrecision(Enum):
    """Precision levels for duration measurements."""

    MICROSECONDS = 0
    MILLISECONDS = 1
    SECONDS = 2


class ErrorCode(IntEnum):
    """System error codes."""

    SUCCESS = 0
    GENERIC_NOT_FOUND = 1
    FILE_NOT_FOUND = 2
    ERROR_OPENING_FILE = 3
    SYSTEM_PATH_NOT_FREE = 4
    LINE_NOT_FOUND = 5


class SystemState(IntEnum):
    """Run state of a system."""

    ACTIVE = 0
    SUSPENDED = 1
    INACTIVE = 2


class KeyState(IntEnum):
    """State of a key as reported by the input backend."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class KeyCode(IntEnum):
    """Keyboard and mouse codes. Member names double as their serialized names."""

    mouse_bu_1 = 0
    mouse_bu_2 = 1
    mouse_bu_3 = 2
    mouse_bu_4 = 3
    mouse_bu_5 = 4
    mouse_bu_6 = 5
    mouse_bu_7 = 6
    mouse_bu_8 = 7
    mouse_bu_last = 7
    mouse_bu_left = 0
    mouse_bu_right = 1
    mouse_bu_middle = 2

    mouse_moved = 110
    mouse_moved_x = 111
    mouse_moved_y = 112
    mouse_scrolled_x = 113
    mouse_scrolled_y = 114

    key_unknown = -1
    key_space = 32
    key_apostrophe = 39
    key_comma = 44
    key_minus = 45
    key_period = 46
    key_slash = 47
    key_0 = 48
    key_1 = 49
    key_2 = 50
    key_3 = 51
    key_4 = 52
    key_5 = 53
    key_6 = 54
    key_7 = 55
    key_8 = 56
    key_9 = 57
    key_semicolon = 59
    key_equal = 61
    key_A = 65
    key_B = 66
    key_C = 67
    key_D = 68
    key_E = 69
    key_F = 70
    key_G = 71
    key_H = 72
    key_I = 73
    key_J = 74
    key_K = 75
    key_L = 76
    key_M = 77
    key_N = 78
    key_O = 79
    key_P = 80
    key_Q = 81
    key_R = 82
    key_S = 83
    key_T = 84
    key_U = 85
    key_V = 86
    key_W = 87
    key_X = 88
    key_Y = 89
    key_Z = 90
    key_backslach = 91
    key_left_bracket = 92
    key_right_bracket = 93
    key_grave_accent = 96
    key_world_1 = 161
    key_world_2 = 162

    key_escape = 256
    key_enter = 257
    key_tab = 258
    key_backspace = 259
    key_insert = 260
    key_delete = 261
    key_right = 262
    key_left = 263
    key_down = 264
    key_up = 265
    key_page_up = 266
    key_page_down = 267
    key_home = 268
    key_end = 269
    key_caps_lock = 280
    key_scroll_lock = 281
    key_num_lock = 282
    key_print_screen = 283
    key_pause = 284
    key_F1 = 290
    key_F2 = 291
    key_F3 = 292
    key_F4 = 293
    key_F5 = 294
    key_F6 = 295
    key_F7 = 296
    key_F8 = 297
    key_F9 = 298
    key_F10 = 299
    key_F11 = 300
    key_F12 = 301
    key_F13 = 302
    key_F14 = 303
    key_F15 = 304
    key_F16 = 305
    key_F17 = 306
    key_F18 = 307
    key_F19 = 308
    key_F20 = 309
    key_F21 = 310
    key_F22 = 311
    key_F23 = 312
    key_F24 = 313
    key_F25 = 314
    key_kp_0 = 320
    key_kp_1 = 321
    key_kp_2 = 322
    key_kp_3 = 323
    key_kp_4 = 324
    key_kp_5 = 325
    key_kp_6 = 326
    key_kp_7 = 327
    key_kp_8 = 328
    key_kp_9 = 329
    key_kp_decimal = 330
    key_kp_divide = 331
    key_kp_multiply = 332
    key_kp_subtrace = 333
    key_kp_add = 334
    key_kp_enter = 335
    key_kp_equal = 336
    key_left_shift = 340
    key_left_control = 341
    key_left_alt = 342
    key_left_super = 343
    key_right_shift = 344
    key_right_control = 345
    key_right_alt = 346
    key_right_super = 347
    key_menu = 348


@dataclass
class Extent3D:
    """A 3D extent: width, height and depth."""

    width: int = 0
    height: int = 0
    depth: int = 0


@dataclass
class Version:
    """A semantic version number."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def to_str(self) -> str:
        """Return the version as ``major:minor:patch``."""
        return f"{self.major}:{self.minor}:{self.patch}"

    def __str__(self) -> str:
        return self.to_str()


@dataclass(eq=False)
class SystemTime:
    """A calendar timestamp with millisecond resolution.

    Ordering ignores ``day_of_week``; equality takes it into account.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    day_of_week: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def _order_key(self) -> tuple[int, ...]:
        return (self.year, self.month, self.day, self.hour,
                self.minute, self.second, self.millisecond)

    def _full_key(self) -> tuple[int, ...]:
        return (self.year, self.month, self.day, self.day_of_week, self.hour,
                self.minute, self.second, self.millisecond)

    def __lt__(self, other: SystemTime) -> bool:
        if not isinstance(other, SystemTime):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __gt__(self, other: SystemTime) -> bool:
        if not isinstance(other, SystemTime):
            return NotImplemented
        return other < self

    def __le__(self, other: SystemTime) -> bool:
        if not isinstance(other, SystemTime):
            return NotImplemented
        return not self > other

    def __ge__(self, other: SystemTime) -> bool:
        if not isinstance(other, SystemTime):
            return NotImplemented
        return not self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemTime):
            return NotImplemented
        return self._full_key() == other._full_key()

    def __hash__(self) -> int:
        return hash(self._full_key())

    def to_str(self) -> str:
        """Return a human-readable representation of the timestamp."""
        return (f"{self.year}-{self.month:02}-{self.day:02} ({self.day_of_week}) "
                f"{self.hour:02}:{self.minute:02}:{self.second:02}.{self.millisecond:03}")