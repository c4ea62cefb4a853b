"""
Soundboard command listing tool

Purpose: print every chat command with its required role, an example and
a description, using the channel's current prefix.
Run with: xdbot-commands  (or python -m xdbot.scripts.list_commands)

Notes:
- Read-only: no channel state is modified
- Reads .env for CHANNEL / DATA_DIR / SOUNDS_DIR; Twitch credentials are not needed
"""

import argparse
import os
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..components.soundboard import SoundboardCommands, SoundboardContext
from ..core.commands import describe_commands
from ..core.config import DATA_DIR, SOUNDS_DIR
from ..core.player import Player, SubprocessAudioBackend, load_sound_library
from ..core.tts import CommandTTS
from ..shared.stores import DEFAULT_PREFIX, open_channel_stores

load_dotenv()


def build_table(channel: str | None, data_dir: Path, sounds_dir: Path) -> Table:
    stores = open_channel_stores(channel, data_dir)
    player = Player(load_sound_library(sounds_dir), stores.cooldowns, SubprocessAudioBackend())
    tree = SoundboardCommands(SoundboardContext(stores, player, CommandTTS())).tree()
    prefix = stores.prefix.get()

    table = Table(title=f"Soundboard commands ({channel or 'no channel'}, prefix {prefix})")
    table.add_column("Command")
    table.add_column("Role")
    table.add_column("Example")
    table.add_column("Description")
    for entry in describe_commands(tree, prefix):
        table.add_row(" ".join(entry.path) or "<sound>", entry.role.label, entry.example, entry.description)
    return table


def main() -> None:
    parser = argparse.ArgumentParser(description="List soundboard chat commands")
    parser.add_argument("--channel", default=os.getenv("CHANNEL"))
    parser.add_argument("--data-dir", type=Path, default=Path(os.getenv("DATA_DIR", DATA_DIR)))
    parser.add_argument("--sounds-dir", type=Path, default=Path(os.getenv("SOUNDS_DIR", SOUNDS_DIR)))
    args = parser.parse_args()

    channel = args.channel.strip().lower() if args.channel else None
    console = Console()
    console.print(build_table(channel, args.data_dir, args.sounds_dir))
    if not channel:
        console.print(f"[yellow]CHANNEL not set, showing defaults (prefix {DEFAULT_PREFIX})[/yellow]")


if __name__ == "__main__":
    main()
