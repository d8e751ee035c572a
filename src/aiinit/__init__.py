"""ai-init: scaffold AI project rules and memory bank files."""

__version__ = "0.6.0"
