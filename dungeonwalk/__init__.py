"""A small top-down walking game with a conversation trigger and a pause menu."""

__version__ = "0.1.0"