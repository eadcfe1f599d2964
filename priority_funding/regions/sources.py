"""Region catalog sources.

Region data is supplied from outside the engine: an injected fixture, a
JSON/YAML file, or an HTTP endpoint serving the catalog JSON.
"""

import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

import httpx
import yaml
from pydantic import ValidationError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from .catalog import RegionCatalog

logger = logging.getLogger(__name__)

# Standard timeout for remote sources: 30s connect, 60s read
SOURCE_TIMEOUT = httpx.Timeout(connect=30.0, read=60.0, write=30.0, pool=30.0)


class RegionSourceError(Exception):
    """Raised when a region source cannot be read or parsed."""


class BaseRegionSource(ABC):
    """Abstract base class for region catalog sources."""

    @abstractmethod
    def fetch_catalog(self) -> RegionCatalog:
        """Read and parse the catalog. May raise any exception."""
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Source identifier (static, file, http)."""
        pass

    def load(self) -> RegionCatalog:
        """Load the catalog with structured logging.

        This is the entry point callers should use.

        Raises:
            RegionSourceError: Wrapping whatever went wrong underneath
        """
        start = time.monotonic()
        try:
            catalog = self.fetch_catalog()
        except Exception as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "load_complete source=%s result=failure error=%s duration_ms=%.0f",
                self.source_name,
                exc,
                duration_ms,
            )
            if isinstance(exc, RegionSourceError):
                raise
            raise RegionSourceError(f"[{self.source_name}] could not load regions: {exc}") from exc

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "load_complete source=%s result=success count=%d duration_ms=%.0f",
            self.source_name,
            len(catalog),
            duration_ms,
        )
        return catalog


class StaticRegionSource(BaseRegionSource):
    """Serves an injected, already-built catalog."""

    def __init__(self, catalog: RegionCatalog):
        self._catalog = catalog

    @property
    def source_name(self) -> str:
        return "static"

    def fetch_catalog(self) -> RegionCatalog:
        return self._catalog


class FileRegionSource(BaseRegionSource):
    """Reads a catalog from a .json, .yaml or .yml file."""

    def __init__(self, filepath: str):
        self.path = Path(filepath)

    @property
    def source_name(self) -> str:
        return "file"

    def fetch_catalog(self) -> RegionCatalog:
        if not self.path.exists():
            raise RegionSourceError(f"Regions file not found: {self.path}")

        if self.path.suffix == '.json':
            with open(self.path, 'r') as f:
                data = json.load(f)
        elif self.path.suffix in ['.yaml', '.yml']:
            with open(self.path, 'r') as f:
                data = yaml.safe_load(f)
        else:
            raise RegionSourceError(
                f"Unsupported file format: {self.path.suffix}. Use .json, .yaml, or .yml"
            )

        return _parse(data)


def source_retry():
    """Retry decorator for remote source calls: 3 attempts, exponential backoff."""
    return retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((httpx.HTTPError, httpx.TimeoutException)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


class HttpRegionSource(BaseRegionSource):
    """Fetches the catalog JSON over HTTP GET."""

    def __init__(self, url: str, timeout: httpx.Timeout = SOURCE_TIMEOUT):
        self.url = url
        self.timeout = timeout

    @property
    def source_name(self) -> str:
        return "http"

    def fetch_catalog(self) -> RegionCatalog:
        data = self._fetch_with_retry()
        return _parse(data)

    @source_retry()
    def _fetch_with_retry(self) -> dict:
        start = time.monotonic()
        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(self.url)
            status_code = response.status_code
            response.raise_for_status()
            data = response.json()

        duration = time.monotonic() - start
        logger.info(
            f"[{self.source_name}] url={self.url} status={status_code} "
            f"duration={duration:.2f}s"
        )
        return data


def _parse(data) -> RegionCatalog:
    try:
        return RegionCatalog.from_dict(data)
    except ValidationError as exc:
        raise RegionSourceError(f"Invalid region record: {exc}") from exc
    except ValueError as exc:
        raise RegionSourceError(str(exc)) from exc
