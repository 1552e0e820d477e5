"""
Application-level records extracted from BOM forecast products.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RequestStatus(Enum):
    """Outcome of a forecast or place-list request."""
    OK = "ok"                            # At least one record extracted
    NOT_FOUND = "not_found"              # Document parsed, nothing matched
    TRANSFER_FAILED = "transfer_failed"  # FTP download failed
    PARSE_FAILED = "parse_failed"        # Document unreadable or malformed


@dataclass
class Area:
    """A forecast area (place) declared in a product."""
    aac: Optional[str]
    description: Optional[str]
    type: Optional[str]
    parent_aac: Optional[str] = None  # Weak reference to another Area's aac

    def to_dict(self) -> Dict[str, Any]:
        """Flat record; ``parent_aac`` is omitted when the area has none."""
        place = {
            "aac": self.aac,
            "description": self.description,
            "type": self.type,
        }
        if self.parent_aac:
            place["parent_aac"] = self.parent_aac
        return place


@dataclass
class ForecastPeriod:
    """
    One forecast period of an area.

    ``values`` holds every ``text`` and ``element`` entry of the period keyed
    by its declared type, in the order they were merged.
    """
    index: Optional[str]
    start_time_local: Optional[str]
    end_time_local: Optional[str]
    values: Dict[str, Optional[str]] = field(default_factory=dict)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.to_dict().get(key, default)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Flat record; value entries overwrite the seeded period fields."""
        forecast = {
            "index": self.index,
            "start_time_local": self.start_time_local,
            "end_time_local": self.end_time_local,
        }
        forecast.update(self.values)
        return forecast


@dataclass
class ForecastResult:
    """Forecast periods for one place in one product."""
    xml_file_name: str
    place_name: str
    forecast: List[ForecastPeriod] = field(default_factory=list)
    status: RequestStatus = RequestStatus.NOT_FOUND
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status in (RequestStatus.OK, RequestStatus.NOT_FOUND)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "xml_file_name": self.xml_file_name,
            "place_name": self.place_name,
            "forecast": [period.to_dict() for period in self.forecast],
            "status": self.status.value,
            "error_message": self.error_message,
        }


@dataclass
class PlaceListResult:
    """All areas declared in one product."""
    xml_file_name: str
    places: List[Area] = field(default_factory=list)
    status: RequestStatus = RequestStatus.NOT_FOUND
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status in (RequestStatus.OK, RequestStatus.NOT_FOUND)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "xml_file_name": self.xml_file_name,
            "places": [area.to_dict() for area in self.places],
            "status": self.status.value,
            "error_message": self.error_message,
        }
