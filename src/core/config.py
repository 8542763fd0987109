"""Runtime configuration model for Chronicle.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_READ_COST
from core.errors import ChronicleConfigError


@dataclass(frozen=True)
class ChronicleConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for persisted series files.
        read_cost: Cost charged per metered timestamp or value read.
    """

    data_root: Path
    read_cost: int

    @classmethod
    def from_env(cls) -> "ChronicleConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ChronicleConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("CHRONICLE_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        read_cost_value = os.getenv("CHRONICLE_READ_COST", str(DEFAULT_READ_COST))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            read_cost=_parse_read_cost(read_cost_value),
        )


def _parse_read_cost(raw_value: str) -> int:
    """Parse the read cost environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative integer cost.

    Raises:
        ChronicleConfigError: If value is not a non-negative integer.
    """
    try:
        read_cost = int(raw_value)
    except ValueError as error:
        raise ChronicleConfigError(
            "Invalid CHRONICLE_READ_COST value: "
            f"expected integer, got '{raw_value}'. "
            "Set CHRONICLE_READ_COST to a numeric value."
        ) from error
    if read_cost < 0:
        raise ChronicleConfigError(
            f"Invalid CHRONICLE_READ_COST value: {read_cost} is negative. "
            "Set CHRONICLE_READ_COST to zero or a positive integer."
        )
    return read_cost
