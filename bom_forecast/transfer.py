"""
FTP transfer and cleanup of BOM forecast products.

Products are downloaded from the anonymous FTP server into a local file
named after the product, then removed once a request has finished with it.
"""

import logging
from ftplib import FTP, all_errors
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_SETTINGS, ForecastSettings
from .exceptions import FilesystemError, TransferError

logger = logging.getLogger(__name__)


def download_file(
    xml_file_name: str,
    settings: Optional[ForecastSettings] = None
) -> Path:
    """
    Download a forecast product from the FTP server.

    The connection is always closed, whether or not the download succeeded.
    A partially written local file is left in place for the caller to clean up.

    Args:
        xml_file_name: Product file name, e.g. ``IDV10753.xml``.
        settings: Server and download directory settings.

    Returns:
        Path of the downloaded local copy.

    Raises:
        TransferError: If connecting, logging in or downloading fails.
    """
    settings = settings or DEFAULT_SETTINGS
    remote_path = settings.remote_path(xml_file_name)
    local_path = settings.local_path(xml_file_name)

    ftp = FTP(timeout=settings.timeout)
    try:
        ftp.connect(settings.host)
        ftp.login(user=settings.user, passwd=settings.password)
        local_path.parent.mkdir(parents=True, exist_ok=True)
        with open(local_path, "wb") as fh:
            ftp.retrbinary(f"RETR {remote_path}", fh.write)
    # ftplib raises ValueError for commands it refuses to send
    except (*all_errors, ValueError) as e:
        raise TransferError(
            f"Failed to download {remote_path} from {settings.host}: {e}",
            xml_file_name
        ) from e
    finally:
        ftp.close()

    logger.info(f"Downloaded {remote_path} from {settings.host} to {local_path}")
    return local_path


def _unlink(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        raise FilesystemError(f"Failed to delete {path}: {e}", path.name) from e


def delete_file(path: Union[str, Path]) -> bool:
    """
    Delete the local copy of a product.

    Failures are logged and never raised.

    Returns:
        True if the file was removed.
    """
    try:
        _unlink(Path(path))
    except FilesystemError as e:
        logger.warning(str(e))
        return False
    logger.debug(f"Deleted {path}")
    return True
