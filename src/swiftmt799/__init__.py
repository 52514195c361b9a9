"""SwiftMT799 intake API: parse uploaded MT799 messages and store their fields."""

__version__ = "0.1.0"
