"""
Request orchestration for BOM forecast products.

Each request downloads a product, parses it, extracts the requested
records and optionally deletes the local copy. Transfer and parse
failures are logged and recorded on the returned result; callers always
get a result object back, never an exception.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_SETTINGS, ForecastSettings
from .exceptions import ParseError, TransferError
from .extract import extract_forecast_data, extract_place_data
from .models import ForecastResult, PlaceListResult, RequestStatus
from .parser import read_document
from .transfer import delete_file, download_file

logger = logging.getLogger(__name__)


class ForecastClient:
    """
    Fetches forecast products from the BOM FTP server.

    The client holds no state besides its settings, so one instance can
    serve any number of independent requests. Concurrent requests must use
    different product names since each one downloads to a file named after
    its product.
    """

    def __init__(self, settings: Optional[ForecastSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    def download_file(self, xml_file_name: str) -> Path:
        """Download a product without extracting anything from it."""
        return download_file(xml_file_name, self.settings)

    def delete_file(self, xml_file_name: str) -> bool:
        return delete_file(self.settings.local_path(xml_file_name))

    # =========================================================================
    # Requests
    # =========================================================================

    def get_forecast(
        self,
        xml_file_name: str,
        place_name: str,
        delete_file_after: bool = True
    ) -> ForecastResult:
        """
        Get the forecast periods for a place.

        Args:
            xml_file_name: Product file name, e.g. ``IDV10753.xml``.
            place_name: Exact area description, e.g. ``Melbourne``.
            delete_file_after: Remove the local copy once done.

        Returns:
            ForecastResult; its ``forecast`` list is empty if the place was
            not found or any stage failed, and ``status`` says which.
        """
        result = ForecastResult(xml_file_name=xml_file_name, place_name=place_name)

        try:
            path = self.download_file(xml_file_name)
            tree = read_document(path)
            result.forecast = extract_forecast_data(tree, place_name)
            result.status = RequestStatus.OK if result.forecast else RequestStatus.NOT_FOUND
            logger.info(f"Forecast {xml_file_name} / {place_name}: {len(result.forecast)} periods")
        except TransferError as e:
            logger.error(f"Forecast transfer failed: {e}")
            result.status = RequestStatus.TRANSFER_FAILED
            result.error_message = str(e)
        except ParseError as e:
            logger.error(f"Forecast parse failed: {e}")
            result.status = RequestStatus.PARSE_FAILED
            result.error_message = str(e)
        finally:
            if delete_file_after:
                self.delete_file(xml_file_name)

        return result

    def get_place_list(
        self,
        xml_file_name: str,
        delete_file_after: bool = True
    ) -> PlaceListResult:
        """
        Get every place (area) declared in a product.

        Returns:
            PlaceListResult; its ``places`` list is empty if any stage failed.
        """
        result = PlaceListResult(xml_file_name=xml_file_name)

        try:
            path = self.download_file(xml_file_name)
            tree = read_document(path)
            result.places = extract_place_data(tree)
            result.status = RequestStatus.OK if result.places else RequestStatus.NOT_FOUND
            logger.info(f"Place list {xml_file_name}: {len(result.places)} places")
        except TransferError as e:
            logger.error(f"Place list transfer failed: {e}")
            result.status = RequestStatus.TRANSFER_FAILED
            result.error_message = str(e)
        except ParseError as e:
            logger.error(f"Place list parse failed: {e}")
            result.status = RequestStatus.PARSE_FAILED
            result.error_message = str(e)
        finally:
            if delete_file_after:
                self.delete_file(xml_file_name)

        return result


# =============================================================================
# Module-level shortcuts using the default settings
# =============================================================================

def get_forecast(
    xml_file_name: str,
    place_name: str,
    delete_file_after: bool = True
) -> ForecastResult:
    return ForecastClient().get_forecast(xml_file_name, place_name, delete_file_after)


def get_place_list(xml_file_name: str, delete_file_after: bool = True) -> PlaceListResult:
    return ForecastClient().get_place_list(xml_file_name, delete_file_after)
