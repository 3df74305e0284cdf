"""Command handling core for a small voice assistant: chunk buffering, spoken numbers and command dispatch."""

__version__ = "0.1.0"

__all__ = ["chunkbuffer", "command", "numwords", "basic_commands", "web_commands", "director"]