"""
Extraction of forecast periods and places from a parsed BOM product.

Only the first ``forecast`` block of the ``product`` root is examined.
Absent collections are treated as empty; nothing here raises on missing
tags or attributes.
"""

import logging
from typing import List

from .models import Area, ForecastPeriod
from .parser import Node, ParsedTree

logger = logging.getLogger(__name__)


def _areas(tree: ParsedTree) -> List[Node]:
    """Area nodes of the first forecast block."""
    product = tree.first("product")
    if product is None:
        return []
    forecast = product.first("forecast")
    if forecast is None:
        return []
    return forecast.get("area")


def _parse_period(period: Node) -> ForecastPeriod:
    forecast = ForecastPeriod(
        index=period.attr("index"),
        start_time_local=period.attr("start-time-local"),
        end_time_local=period.attr("end-time-local"),
    )
    # Elements are merged after texts so they win on a shared type
    for entry in period.get("text") + period.get("element"):
        value_type = entry.attr("type")
        if value_type is None:
            continue
        forecast.values[value_type] = entry.text
    return forecast


def extract_forecast_data(tree: ParsedTree, place_name: str) -> List[ForecastPeriod]:
    """
    Extract the forecast periods of every area described as ``place_name``.

    Matching is exact and case-sensitive. Periods of several areas sharing
    the description are concatenated in document order.

    Returns:
        List of ForecastPeriod objects, empty if the place was not found.
    """
    forecast_data = []

    for area in _areas(tree):
        if area.attr("description") != place_name:
            continue

        for period in area.get("forecast-period"):
            forecast_data.append(_parse_period(period))

    logger.debug(f"Extracted {len(forecast_data)} forecast periods for {place_name!r}")
    return forecast_data


def extract_place_data(tree: ParsedTree) -> List[Area]:
    """Extract every area of the product, in document order."""
    place_data = []

    for area in _areas(tree):
        place_data.append(Area(
            aac=area.attr("aac"),
            description=area.attr("description"),
            type=area.attr("type"),
            parent_aac=area.attr("parent-aac") or None,
        ))

    return place_data
