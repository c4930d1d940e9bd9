"""Core helpers shared by every command: config, errors, fallbacks."""
