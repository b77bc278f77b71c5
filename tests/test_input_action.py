import pytest

from gluttony.data_types import KeyCode
from gluttony.input_action import (
    ActionType,
    InputAction,
    KeyBindingDetails,
    ModifierFlag,
    TriggerFlag,
)


def test_default_action_has_no_bindings():
    action = InputAction()
    assert len(action) == 0
    assert action.value is ActionType.BOOLEAN
    assert action.data is False


def test_length_matches_bindings():
    bindings = [KeyBindingDetails(KeyCode.key_W), KeyBindingDetails(KeyCode.key_S)]
    action = InputAction(key_bindings=bindings)
    assert len(action) == len(bindings)


def test_get_key_returns_same_binding():
    binding = KeyBindingDetails(KeyCode.key_A, TriggerFlag.KEY_DOWN, ModifierFlag.NEGATE)
    action = InputAction(key_bindings=[binding])
    assert action.get_key(0) is binding
    assert action.get_key(0).key is KeyCode.key_A


def test_get_key_out_of_range():
    action = InputAction()
    with pytest.raises(IndexError):
        action.get_key(0)


def test_default_binding_is_unknown_key():
    binding = KeyBindingDetails()
    assert binding.key is KeyCode.key_unknown
    assert binding.trigger_flags == 0
    assert binding.modifier_flags == 0


@pytest.mark.parametrize("flag_type", [TriggerFlag, ModifierFlag])
def test_flags_are_single_bits(flag_type):
    for member in flag_type:
        assert bin(int(member)).count("1") == 1


def test_non_none_trigger_flags_are_distinct():
    values = [int(m) for m in TriggerFlag]
    assert len(values) == len(set(values))
    assert [TriggerFlag(v) for v in values] == list(TriggerFlag)


def test_flag_combination_membership():
    combined = TriggerFlag(int(TriggerFlag.KEY_DOWN) | int(TriggerFlag.KEY_HOLD))
    assert TriggerFlag.KEY_DOWN in combined
    assert TriggerFlag.KEY_HOLD in combined
    assert TriggerFlag.KEY_UP not in combined


@pytest.mark.parametrize(
    "action_type, size",
    [(ActionType.VEC_2D, 2), (ActionType.VEC_3D, 3)],
)
def test_vector_data_defaults(action_type, size):
    action = InputAction(value=action_type)
    assert len(action.data) == size
    assert all(v == 0.0 for v in action.data)
    assert action.target == action.data


def test_value_accepts_plain_int():
    action = InputAction(value=int(ActionType.VEC_1D))
    assert action.value is ActionType.VEC_1D
    assert action.data == 0.0