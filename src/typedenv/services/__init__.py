"""Service layer behind the typedenv CLI commands."""
