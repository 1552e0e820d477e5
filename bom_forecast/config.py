"""
Configuration for the BOM forecast fetcher.

Defaults point at the Bureau of Meteorology anonymous FTP product
directory. The core functions take a ForecastSettings explicitly; only the
HTTP entry point reads the environment.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

# BOM anonymous FTP data source
BOM_FTP_HOST = "ftp.bom.gov.au"
BOM_FTP_DIR = "/anon/gen/fwo/"
BOM_FTP_USER = "anonymous"
BOM_FTP_PASSWORD = "guest"


@dataclass(frozen=True)
class ForecastSettings:
    """Where and how to fetch forecast products."""
    host: str = BOM_FTP_HOST
    remote_dir: str = BOM_FTP_DIR
    user: str = BOM_FTP_USER
    password: str = BOM_FTP_PASSWORD
    timeout: Optional[float] = None  # None blocks until the server answers
    download_dir: Path = Path(".")

    def __post_init__(self):
        # ftplib only supports blocking sockets or a positive timeout
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"FTP timeout must be positive, got {self.timeout}")

    def remote_path(self, xml_file_name: str) -> str:
        """Full remote path of a product on the server."""
        return self.remote_dir.rstrip("/") + "/" + xml_file_name

    def local_path(self, xml_file_name: str) -> Path:
        """Local path the product is downloaded to."""
        return Path(self.download_dir) / xml_file_name

    def with_download_dir(self, download_dir: Path) -> "ForecastSettings":
        return replace(self, download_dir=Path(download_dir))

    @classmethod
    def from_env(cls) -> "ForecastSettings":
        """Build settings from BOM_* environment variables."""
        timeout = os.getenv("BOM_FTP_TIMEOUT")
        return cls(
            host=os.getenv("BOM_FTP_HOST", BOM_FTP_HOST),
            remote_dir=os.getenv("BOM_FTP_DIR", BOM_FTP_DIR),
            user=os.getenv("BOM_FTP_USER", BOM_FTP_USER),
            password=os.getenv("BOM_FTP_PASSWORD", BOM_FTP_PASSWORD),
            timeout=float(timeout) if timeout else None,
            download_dir=Path(os.getenv("BOM_DOWNLOAD_DIR", ".")),
        )


DEFAULT_SETTINGS = ForecastSettings()
