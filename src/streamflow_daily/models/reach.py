"""
Reach data models.

Contains the reach metadata DTO with its return-period thresholds.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..core import constants


@dataclass
class ReachData:
    """River reach metadata with return-period flow thresholds."""

    reach_id: str
    river_name: str = "Unknown"
    latitude: float = 0.0
    longitude: float = 0.0
    city: Optional[str] = None
    state: Optional[str] = None
    custom_name: Optional[str] = None
    # Recurrence interval (years) -> flow threshold, e.g. {2: 3518.03, 5: 6119.41}
    return_periods: Optional[Dict[int, float]] = None
    return_period_unit: str = constants.RETURN_PERIOD_UNIT

    @property
    def display_name(self) -> str:
        return self.custom_name or self.river_name

    @property
    def has_return_periods(self) -> bool:
        return bool(self.return_periods)

    def _sorted_periods(self) -> List[Tuple[int, float]]:
        return sorted(self.return_periods.items(), key=lambda item: item[0])

    def _to_table_unit(self, flow: float, unit: str) -> float:
        from ..processing.converter import UnitConverter

        return UnitConverter().convert(flow, unit, self.return_period_unit)

    def get_flow_category(self, flow: float, unit: str) -> str:
        """
        Get the flow category for a flow value.

        Thresholds are walked in ascending recurrence-interval order; the
        first one the flow is below decides the label.

        Args:
            flow: Flow value
            unit: Unit of the flow value (CFS or CMS)

        Returns:
            'Normal', 'Elevated', 'High', 'Flood Risk', or 'Unknown' when
            there are no return periods

        Raises:
            InvalidUnitError: If either unit is unsupported
        """
        if not self.has_return_periods:
            return constants.CATEGORY_UNKNOWN

        table_flow = self._to_table_unit(flow, unit)

        for years, threshold in self._sorted_periods():
            if table_flow < threshold:
                if years == constants.NORMAL_RECURRENCE_YEARS:
                    return constants.CATEGORY_NORMAL
                if years <= constants.ELEVATED_MAX_RECURRENCE_YEARS:
                    return constants.CATEGORY_ELEVATED
                return constants.CATEGORY_HIGH

        return constants.CATEGORY_FLOOD_RISK

    def get_next_threshold(self, flow: float, unit: str) -> Optional[Tuple[int, float]]:
        """
        Get the next return-period threshold the flow has not reached.

        Returns:
            (years, threshold in the table unit), or None when every
            threshold is exceeded or there are no return periods
        """
        if not self.has_return_periods:
            return None

        table_flow = self._to_table_unit(flow, unit)
        for years, threshold in self._sorted_periods():
            if table_flow < threshold:
                return years, threshold
        return None

    @classmethod
    def from_return_period_api(cls, payload: List[Dict[str, Any]]) -> "ReachData":
        """
        Parse the return-period API response.

        The response is an array whose first element holds 'feature_id' and
        'return_period_<years>' flow values in CMS.

        Raises:
            ValueError: If the payload is empty or malformed
        """
        if not payload:
            raise ValueError("Return period API returned empty array")

        record = payload[0]
        if not isinstance(record, dict) or "feature_id" not in record:
            raise ValueError("Return period API response is missing 'feature_id'")

        return cls(
            reach_id=str(record["feature_id"]),
            return_periods=_parse_return_periods(
                {
                    key[len("return_period_"):]: value
                    for key, value in record.items()
                    if key.startswith("return_period_")
                }
            ),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReachData":
        """
        Parse reach metadata as stored in a forecast document or cache.

        Raises:
            ValueError: If the reach id is missing
        """
        reach_id = data.get("reachId") or data.get("reach_id")
        if reach_id is None:
            raise ValueError("Reach metadata is missing 'reachId'")

        return cls(
            reach_id=str(reach_id).strip(),
            river_name=data.get("riverName") or data.get("name") or "Unknown",
            latitude=float(data.get("latitude") or 0.0),
            longitude=float(data.get("longitude") or 0.0),
            city=data.get("city"),
            state=data.get("state"),
            custom_name=data.get("customName"),
            return_periods=_parse_return_periods(data.get("returnPeriods")),
            return_period_unit=data.get("returnPeriodUnit") or constants.RETURN_PERIOD_UNIT,
        )


def _parse_return_periods(raw: Optional[Dict[Any, Any]]) -> Optional[Dict[int, float]]:
    """Parse {"2": 3518.03, ...} into {2: 3518.03, ...}, skipping bad keys."""
    if not raw:
        return None

    periods: Dict[int, float] = {}
    for key, value in raw.items():
        try:
            periods[int(key)] = float(value)
        except (TypeError, ValueError):
            continue
    return periods or None
