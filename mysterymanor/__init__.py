"""A murder-mystery puzzle game: an introduction, a quiz level with a passcode, and mini-games."""

__version__ = "0.1.0"