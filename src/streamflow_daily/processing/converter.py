"""
Unit conversion module.

Converts streamflow values between cubic feet per second (CFS) and cubic
meters per second (CMS).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core import constants


class InvalidUnitError(ValueError):
    """Raised when a conversion involves an unsupported flow unit."""

    def __init__(self, unit: Optional[str]):
        self.unit = unit
        super().__init__(
            f"Unsupported flow unit: {unit!r} "
            f"(expected one of {', '.join(constants.SUPPORTED_FLOW_UNITS)})"
        )


class UnitConverter:
    """Convert between supported flow units."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize unit converter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def normalize_unit(unit: Optional[str]) -> str:
        """
        Normalize a unit name to its canonical upper-case form.

        Raises:
            InvalidUnitError: If the unit is not supported
        """
        if not isinstance(unit, str):
            raise InvalidUnitError(unit)
        normalized = unit.strip().upper()
        if normalized not in constants.SUPPORTED_FLOW_UNITS:
            raise InvalidUnitError(unit)
        return normalized

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert a flow value between units.

        Args:
            value: Flow value
            from_unit: Source unit (CFS or CMS, case-insensitive)
            to_unit: Target unit

        Returns:
            Converted flow value. Identical units return the value unchanged.

        Raises:
            InvalidUnitError: If either unit is not supported
        """
        source = self.normalize_unit(from_unit)
        target = self.normalize_unit(to_unit)

        if source == target:
            return value

        if source == constants.UNIT_CMS:
            return value * constants.CMS_TO_CFS

        return value / constants.CMS_TO_CFS


@dataclass(frozen=True)
class UnitContext:
    """
    Snapshot of the user's flow unit preference.

    Passed into each processing call so that unit behavior never depends on
    shared mutable state.
    """

    current_unit: str = constants.DEFAULT_FLOW_UNIT
    converter: UnitConverter = field(default_factory=UnitConverter, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self, "current_unit", UnitConverter.normalize_unit(self.current_unit)
        )

    def convert_flow(self, value: float, from_unit: str, to_unit: str) -> float:
        """Convert a flow value between units."""
        return self.converter.convert(value, from_unit, to_unit)

    def to_preferred_unit(self, value: float, from_unit: str) -> float:
        """Convert a flow value to the preferred unit."""
        return self.convert_flow(value, from_unit, self.current_unit)

    def from_preferred_unit(self, value: float, to_unit: str) -> float:
        """Convert a flow value from the preferred unit to another unit."""
        return self.convert_flow(value, self.current_unit, to_unit)
