from xdbot.core.aliases import resolve


def test_resolve_alias() -> None:
    table = {"sssss": "ame_hates_minecraft"}
    assert resolve(table, "SSSss") == "ame_hates_minecraft"


def test_resolve_canonical_name_is_unchanged() -> None:
    table = {"sssss": "ame_hates_minecraft"}
    assert resolve(table, "ame_hates_minecraft") == "ame_hates_minecraft"
    assert resolve(table, "Boom") == "boom"


def test_resolve_follows_one_hop_only() -> None:
    table = {"a": "b", "b": "boom"}
    assert resolve(table, "a") == "b"
