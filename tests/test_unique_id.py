import pytest

from gluttony.unique_id import UUID


def test_explicit_value_round_trip():
    uid = UUID(42)
    assert int(uid) == 42
    assert uid == 42
    assert uid == UUID(42)


def test_random_values_in_range():
    for _ in range(50):
        value = int(UUID())
        assert 0 <= value < 2**64


def test_random_values_are_distinct():
    ids = {int(UUID()) for _ in range(200)}
    assert len(ids) == 200


def test_hash_matches_int_and_works_as_key():
    uid = UUID(12345)
    assert hash(uid) == hash(12345)
    table = {uid: "entity"}
    assert table[UUID(12345)] == "entity"


def test_index_usable_for_indexing():
    items = ["a", "b", "c"]
    assert items[UUID(1)] == "b"


def test_copy_from_other_uuid():
    original = UUID()
    assert UUID(original) == original


def test_repr_and_str():
    assert repr(UUID(7)) == "UUID(7)"
    assert str(UUID(99)) == str(99)


def test_max_value_accepted():
    assert int(UUID(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        UUID(bad)


@pytest.mark.parametrize("bad", ["12", 1.5, True])
def test_non_integer_rejected(bad):
    with pytest.raises(TypeError):
        UUID(bad)


def test_inequality_with_other_types():
    assert (UUID(3) == "3") is False
    assert UUID(3) != UUID(4)