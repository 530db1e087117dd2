"""devhubbot - a Discord bot that reports GitHub activity."""

__version__ = "0.1.0"
