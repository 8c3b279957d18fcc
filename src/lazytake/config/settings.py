"""Settings for the lazytake command line.

Priority (highest first): CLI flags passed as init kwargs, ``LAZYTAKE_*``
environment variables, code defaults.
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import Field
from pydantic_settings import BaseSettings

PARSERS: dict[str, Callable[[str], Any]] = {"int": int, "float": float, "str": str}


class LazyTakeSettings(BaseSettings):
    """Options shared by the ``lazytake`` sub-commands.

    Attributes:
        count: Default number of elements to take when a command omits it.
        parse: How tokens read from text input are converted.
        verbose: Log DEBUG events (tier selection) to stderr.
        log_json: Render log lines as JSON.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LAZYTAKE_",
    }

    count: int = Field(default=1, ge=0)
    parse: Literal["int", "float", "str"] = "int"
    verbose: bool = False
    log_json: bool = False

    @property
    def parser(self) -> Callable[[str], Any]:
        return PARSERS[self.parse]

    @classmethod
    def from_cli(cls, **overrides: Any) -> LazyTakeSettings:
        """Build settings, letting flags that were actually given win over env vars."""
        return cls(**{k: v for k, v in overrides.items() if v is not None})
