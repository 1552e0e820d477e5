"""Shared fixtures: a sample BOM product and a fake FTP server (no network)."""

from ftplib import error_perm
from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock, patch

import pytest

from bom_forecast.client import ForecastClient
from bom_forecast.config import ForecastSettings

SAMPLE_PRODUCT = """<?xml version="1.0" encoding="UTF-8"?>
<product xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" version="1.7" xsi:noNamespaceSchemaLocation="http://www.bom.gov.au/schema/v1.7/product.xsd">
  <amoc>
    <source>
      <sender>Australian Government Bureau of Meteorology</sender>
    </source>
    <identifier>IDV10753</identifier>
  </amoc>
  <forecast>
    <area aac="VIC_FA001" description="Victoria" type="region"/>
    <area aac="VIC_PW007" description="Central" type="public-district" parent-aac="VIC_FA001"/>
    <area aac="VIC_PT042" description="Melbourne" type="location" parent-aac="VIC_PW007">
      <forecast-period index="0" start-time-local="2024-05-01T05:00:00+10:00" end-time-local="2024-05-02T00:00:00+10:00">
        <element type="forecast_icon_code">3</element>
        <element type="air_temperature_maximum" units="Celsius">18</element>
        <text type="precis">Partly cloudy.</text>
        <text type="probability_of_precipitation">10%</text>
      </forecast-period>
      <forecast-period index="1" start-time-local="2024-05-02T00:00:00+10:00" end-time-local="2024-05-03T00:00:00+10:00">
        <element type="forecast_icon_code">12</element>
        <element type="precis">Showers.</element>
        <text type="precis">Rain at times.</text>
      </forecast-period>
    </area>
    <area aac="VIC_PT043" description="Geelong" type="location" parent-aac="VIC_PW007"/>
  </forecast>
  <forecast>
    <area aac="VIC_PT999" description="Ignored" type="location"/>
  </forecast>
</product>
"""


@pytest.fixture
def sample_product() -> str:
    return SAMPLE_PRODUCT


@pytest.fixture
def settings(tmp_path: Path) -> ForecastSettings:
    return ForecastSettings(download_dir=tmp_path)


@pytest.fixture
def forecast_client(settings: ForecastSettings) -> ForecastClient:
    return ForecastClient(settings)


@pytest.fixture
def remote_files() -> Dict[str, bytes]:
    """Files served by the fake FTP server, keyed by remote path."""
    return {"/anon/gen/fwo/IDV10753.xml": SAMPLE_PRODUCT.encode("utf-8")}


@pytest.fixture
def fake_ftp(remote_files: Dict[str, bytes]):
    """Patch ftplib.FTP in the transfer module with an in-memory server."""
    with patch("bom_forecast.transfer.FTP") as mock_ftp_cls:
        ftp = MagicMock()
        mock_ftp_cls.return_value = ftp

        def retrbinary(cmd: str, callback) -> None:
            remote_path = cmd.split(" ", 1)[1]
            if remote_path not in remote_files:
                raise error_perm(f"550 {remote_path}: No such file or directory")
            callback(remote_files[remote_path])

        ftp.retrbinary.side_effect = retrbinary
        ftp.factory = mock_ftp_cls
        yield ftp
