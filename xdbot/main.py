import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

from .components.soundboard import SoundboardCommands, SoundboardContext  # noqa: E402
from .core.bot import Bot  # noqa: E402
from .core.config import SoundboardSettings, get_settings  # noqa: E402
from .core.dispatcher import Soundboard  # noqa: E402
from .core.logging import setup_logging  # noqa: E402
from .core.player import Player, SubprocessAudioBackend, load_sound_library  # noqa: E402
from .core.tts import CommandTTS  # noqa: E402
from .shared.stores import open_channel_stores  # noqa: E402

LOGGER: logging.Logger = logging.getLogger("Bot")


def build_soundboard(settings: SoundboardSettings) -> Soundboard:
    stores = open_channel_stores(
        settings.channel, settings.data_dir, default_prefix=settings.default_prefix
    )
    player = Player(
        load_sound_library(settings.sounds_dir),
        stores.cooldowns,
        SubprocessAudioBackend(settings.player_command),
    )
    ctx = SoundboardContext(stores=stores, player=player, tts=CommandTTS(settings.tts_command))
    return Soundboard(stores, SoundboardCommands(ctx).tree())


async def run(settings: SoundboardSettings) -> None:
    soundboard = build_soundboard(settings)
    LOGGER.info(f"Soundboard ready for {settings.channel} (prefix: {soundboard.stores.prefix.get()})")

    async with Bot(
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        bot_id=settings.bot_id,
        owner_id=settings.owner_id,
        channel=settings.channel,
        soundboard=soundboard,
    ) as bot:
        await bot.start()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        LOGGER.warning("Shutting down due to KeyboardInterrupt")


if __name__ == "__main__":
    main()
