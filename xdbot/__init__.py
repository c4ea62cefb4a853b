"""xdbot: a Twitch chat soundboard bot."""

__version__ = "0.1.0"
