from xdbot.core.commands import describe_commands
from xdbot.scripts.list_commands import build_table
from xdbot.shared.models.user import Role


def test_command_surface(commands) -> None:
    helps = {" ".join(entry.path): entry for entry in describe_commands(commands.tree(), "!xd")}

    assert list(helps) == [
        "play",
        "stop",
        "role",
        "prefs",
        "alias set",
        "alias rm",
        "prefix",
        "say",
        "cooldown set user",
        "cooldown set sound",
        "cooldown rm user",
        "cooldown rm sound",
    ]
    assert helps["play"].example == "!xdplay ame_hates_minecraft"
    assert helps["play"].description == "Play the sound ame_hates_minecraft"
    assert helps["role"].role is Role.STREAMER
    assert helps["role"].description.endswith("Roles: None, User, Editor, Streamer")
    assert "autoplay (Allows playing sounds without the command prefix)" in helps["prefs"].description
    assert helps["prefs"].description.startswith("Update preference autoplay. Keys: ")
    assert helps["cooldown rm sound"].description == "Remove sound cooldown for ame_hates_minecraft"


def test_build_table_uses_stored_prefix(tmp_path) -> None:
    (tmp_path / "prefix.ame.json").write_text('"`"', encoding="utf-8")

    table = build_table("ame", tmp_path, tmp_path / "sounds")

    assert "prefix `" in str(table.title)
    assert table.row_count == 12
