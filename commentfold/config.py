"""Run configuration for commentfold invocations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError


class OutputMode(str, Enum):
    """Where rewritten sources are sent."""

    INPLACE = "inplace"
    PRINT = "print"
    DIFF = "diff"


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run, built once from command line arguments."""

    output: OutputMode = OutputMode.INPLACE
    dry_run: bool = False
    verbose: bool = False

    @property
    def mode(self) -> OutputMode:
        """Effective output mode; a dry run always previews as a diff."""
        if self.dry_run:
            return OutputMode.DIFF
        return self.output

    @classmethod
    def from_options(
        cls, output: str | OutputMode = OutputMode.INPLACE, dry_run: bool = False, verbose: bool = False
    ) -> "RunConfig":
        return cls(output=_as_mode(output), dry_run=bool(dry_run), verbose=bool(verbose))


def _as_mode(value: str | OutputMode) -> OutputMode:
    if isinstance(value, OutputMode):
        return value
    normalized = str(value).strip().lower()
    try:
        return OutputMode(normalized)
    except ValueError:
        choices = ", ".join(mode.value for mode in OutputMode)
        raise ConfigError(f"Unknown output mode '{value}' (expected one of: {choices})") from None


__all__ = ["OutputMode", "RunConfig"]
