"""
REST API module for the BOM forecast fetcher.

Provides endpoints for:
- Forecast periods of a place in a BOM product
- The list of places declared in a BOM product
"""

import logging
import os
import tempfile
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from fastapi import FastAPI, Path, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .client import ForecastClient
from .config import ForecastSettings

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# BOM product file names, e.g. IDV10753.xml
PRODUCT_NAME_PATTERN = r"^ID[A-Z0-9]+\.xml$"


# =============================================================================
# Pydantic Models
# =============================================================================

class ForecastResponse(BaseModel):
    xml_file_name: str
    place_name: str
    forecast: List[Dict[str, Optional[str]]]
    status: str
    error_message: Optional[str]


class PlaceListResponse(BaseModel):
    xml_file_name: str
    places: List[Dict[str, Optional[str]]]
    status: str
    error_message: Optional[str]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    ftp_host: str


# =============================================================================
# Global State
# =============================================================================

client: Optional[ForecastClient] = None


def get_client() -> ForecastClient:
    global client
    if client is None:
        client = ForecastClient(ForecastSettings.from_env())
    return client


@contextmanager
def request_client() -> Iterator[ForecastClient]:
    """Client that downloads into a directory private to one request."""
    with tempfile.TemporaryDirectory(prefix="bom_forecast_") as download_dir:
        yield ForecastClient(get_client().settings.with_download_dir(download_dir))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_client().settings
    logger.info(f"Starting BOM forecast API (ftp://{settings.host}{settings.remote_dir})")
    yield
    logger.info("Shutdown complete")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="BOM Forecast API",
    description="Forecasts and places from Bureau of Meteorology XML products",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/", tags=["Info"])
async def root():
    """API information."""
    return {
        "name": "BOM Forecast API",
        "version": "1.0.0",
        "description": "Forecast data from BOM XML products",
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow().isoformat(),
        ftp_host=get_client().settings.host,
    )


# Plain def endpoints: FTP transfers block, so FastAPI runs them in its threadpool

@app.get("/forecast/{xml_file_name}", response_model=ForecastResponse, tags=["Forecasts"])
def get_forecast(
    xml_file_name: str = Path(..., pattern=PRODUCT_NAME_PATTERN),
    place: str = Query(..., min_length=1, description="Exact place description"),
):
    """Get the forecast periods of a place in a product."""
    with request_client() as forecast_client:
        result = forecast_client.get_forecast(xml_file_name, place)
    return ForecastResponse(**result.to_dict())


@app.get("/places/{xml_file_name}", response_model=PlaceListResponse, tags=["Places"])
def get_places(xml_file_name: str = Path(..., pattern=PRODUCT_NAME_PATTERN)):
    """Get every place declared in a product."""
    with request_client() as forecast_client:
        result = forecast_client.get_place_list(xml_file_name)
    return PlaceListResponse(**result.to_dict())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bom_forecast.api:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("DEBUG", "false").lower() == "true"
    )
