"""CLI settings — flags and ``TYPEDENV_*`` env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags that were actually passed
  2. Env vars     — ``TYPEDENV_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class TypedEnvSettings(BaseSettings):
    """Output and logging settings for the typedenv CLI.

    Stored on the :class:`~typedenv.commands._context.AppContext` created
    by the root CLI group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPEDENV_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> TypedEnvSettings:
        """Construct settings from CLI invocation.

        Click reports an absent flag as False, which would shadow a
        ``TYPEDENV_*`` variable. Only flags that are set are passed on.
        """
        passed = {key: value for key, value in cli_flags.items() if value}
        return cls(**passed)
