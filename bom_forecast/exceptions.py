"""
Exceptions for the BOM forecast fetcher.

Each stage of a request has its own error kind so the orchestration layer
can record which stage failed:
- TransferError: FTP connection or download failure
- ParseError: document is unreadable or not well-formed XML
- FilesystemError: local copy could not be deleted (never fatal)
"""

from typing import Optional


class ForecastError(Exception):
    """Base exception for all forecast fetcher errors."""

    def __init__(self, message: str, xml_file_name: Optional[str] = None):
        self.xml_file_name = xml_file_name
        super().__init__(message)


class TransferError(ForecastError):
    """Raised when the document cannot be downloaded from the FTP server."""
    pass


class ParseError(ForecastError):
    """Raised when the downloaded document is not well-formed markup."""
    pass


class FilesystemError(ForecastError):
    """Raised internally when the local copy cannot be removed."""
    pass
