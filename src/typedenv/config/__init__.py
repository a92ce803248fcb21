"""Configuration and logging for the typedenv CLI."""
