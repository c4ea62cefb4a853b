from xdbot.core.cooldowns import CooldownField, clear_cooldown, set_cooldown
from xdbot.shared.models.cooldown import Cooldown

SOUNDS = {"foo", "bar"}


def test_set_preserves_other_field() -> None:
    table = set_cooldown({}, "foo", CooldownField.PER_USER, 5000, SOUNDS)
    table = set_cooldown(table, "foo", CooldownField.PER_SOUND, 3000, SOUNDS)
    assert table == {"foo": Cooldown(per_user=5000, per_sound=3000)}

    table = set_cooldown(table, "foo", CooldownField.PER_USER, 1000, SOUNDS)
    assert table["foo"] == Cooldown(per_user=1000, per_sound=3000)


def test_set_does_not_mutate_input() -> None:
    original = {"foo": Cooldown(per_user=5000)}
    updated = set_cooldown(original, "foo", CooldownField.PER_SOUND, 3000, SOUNDS)
    assert original == {"foo": Cooldown(per_user=5000)}
    assert updated is not original


def test_set_unknown_sound_is_noop() -> None:
    table = {"foo": Cooldown(per_user=1)}
    assert set_cooldown(table, "nope", CooldownField.PER_USER, 5000, SOUNDS) is table


def test_set_zero_on_empty_record_drops_key() -> None:
    table = {"foo": Cooldown(per_user=5000)}
    assert set_cooldown(table, "foo", CooldownField.PER_USER, 0, SOUNDS) == {}


def test_clear_removes_key_when_other_field_zero() -> None:
    table = {"foo": Cooldown(per_user=5000), "bar": Cooldown(per_sound=1)}
    assert clear_cooldown(table, "foo", CooldownField.PER_USER, SOUNDS) == {"bar": Cooldown(per_sound=1)}


def test_clear_keeps_key_when_other_field_nonzero() -> None:
    table = {"foo": Cooldown(per_user=5000, per_sound=3000)}
    table = clear_cooldown(table, "foo", CooldownField.PER_SOUND, SOUNDS)
    assert table == {"foo": Cooldown(per_user=5000, per_sound=0)}


def test_clear_without_record_is_noop() -> None:
    table = {"bar": Cooldown(per_sound=1)}
    assert clear_cooldown(table, "foo", CooldownField.PER_USER, SOUNDS) is table
    assert clear_cooldown(table, "nope", CooldownField.PER_USER, SOUNDS) is table


def test_field_from_scope() -> None:
    assert CooldownField.from_scope("user") is CooldownField.PER_USER
    assert CooldownField.from_scope("sound") is CooldownField.PER_SOUND
