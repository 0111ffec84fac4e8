# utils/config.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Engine configuration values

"""Configuration for truth table generation.

The engine has no configuration file; values come from defaults below and
are overridden by command line flags.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from expression.notation import Notation

# Enumeration cost is 2^n rows; 12 variables is 4096 rows
DEFAULT_MAX_VARIABLES = 12


@dataclass(frozen=True)
class EngineConfig:
    """Immutable engine settings.

    Attributes:
        max_variables: Largest accepted variable count, or None for no cap
        notation: Notation assumed for formula text when none is given
    """

    max_variables: Optional[int] = DEFAULT_MAX_VARIABLES
    notation: Notation = Notation.SYMBOLIC

    def __post_init__(self):
        if self.max_variables is not None and self.max_variables < 1:
            raise ValueError(
                f"max_variables must be positive or None, got {self.max_variables}"
            )
        object.__setattr__(self, "notation", Notation.coerce(self.notation))

    def with_overrides(self, **overrides) -> EngineConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_CONFIG = EngineConfig()
