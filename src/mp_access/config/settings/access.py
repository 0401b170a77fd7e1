"""Config settings – AccessSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_access.config.settings.base import Settings
from mp_access.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class AccessSettings(Settings):
    """Runtime settings, read from ``ACCESS_*`` environment variables.

    ``fetch_timeout_seconds`` bounds every upstream resource-definition fetch
    made by a resource provider.
    """

    _prefix: ClassVar[str] = "ACCESS"

    log_level: str = "INFO"
    json_logs: bool = True
    fetch_timeout_seconds: float = 10.0

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if self.fetch_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "fetch_timeout_seconds", self.fetch_timeout_seconds, "must be positive"
            )


__all__ = ["AccessSettings"]
