"""
BOM Forecast Fetcher

Retrieves Bureau of Meteorology forecast XML products over anonymous FTP
and extracts:
- Forecast periods for a named place
- The directory of places declared in a product
"""

from .client import ForecastClient, get_forecast, get_place_list
from .config import ForecastSettings
from .exceptions import FilesystemError, ForecastError, ParseError, TransferError
from .extract import extract_forecast_data, extract_place_data
from .models import Area, ForecastPeriod, ForecastResult, PlaceListResult, RequestStatus
from .parser import Node, ParsedTree, parse_document, read_document
from .transfer import delete_file, download_file

__version__ = "1.0.0"

__all__ = [
    "ForecastClient",
    "get_forecast",
    "get_place_list",
    "download_file",
    "delete_file",
    "ForecastSettings",
    "ForecastError",
    "TransferError",
    "ParseError",
    "FilesystemError",
    "Node",
    "ParsedTree",
    "parse_document",
    "read_document",
    "extract_forecast_data",
    "extract_place_data",
    "Area",
    "ForecastPeriod",
    "ForecastResult",
    "PlaceListResult",
    "RequestStatus",
]
