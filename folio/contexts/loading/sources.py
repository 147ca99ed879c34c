"""
Profile Sources

A Source returns the raw profile document text or fails with SourceUnavailable
(MalformedDocument when a file body is not UTF-8).
Two are provided: a local file and an HTTP(S) URL. Neither retries.
"""

import asyncio
import os
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import httpx
from dotenv import load_dotenv

from folio.contexts.loading.exceptions import MalformedDocument, SourceUnavailable

load_dotenv()
HTTP_TIMEOUT_S = float(os.getenv("FOLIO_HTTP_TIMEOUT_S", "10"))

YAML_SUFFIXES = (".yaml", ".yml")


def _format_from_path(path: str) -> str:
    """'yaml' for .yaml/.yml paths, 'json' for everything else."""
    return "yaml" if path.lower().endswith(YAML_SUFFIXES) else "json"


class FileSource:
    """Reads the profile document from a local file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.location = str(self.path)
        self.document_format = _format_from_path(self.path.name)

    async def fetch(self) -> str:
        try:
            body = await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            raise SourceUnavailable(
                "Failed to read profile data", location=self.location, original_error=e
            ) from e

        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocument(
                f"Profile data is not valid UTF-8: {e}",
                snippet=body[:200].decode("utf-8", errors="replace"),
            ) from e


class HttpSource:
    """
    Fetches the profile document over HTTP(S) with httpx.

    Any non-2xx status is a SourceUnavailable carrying the status code.

    Args:
        url: Document URL
        timeout: Client timeout in seconds (default: FOLIO_HTTP_TIMEOUT_S)
        transport: Optional httpx transport (e.g., httpx.MockTransport in tests)
    """

    def __init__(
        self,
        url: str,
        timeout: float = HTTP_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.location = url
        self.timeout = timeout
        self.transport = transport
        self.document_format = _format_from_path(urlparse(url).path)

    async def fetch(self) -> str:
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=self.timeout,
                transport=self.transport,
                headers={"Accept": "application/json, application/yaml;q=0.9, */*;q=0.1"},
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise SourceUnavailable(
                "Failed to fetch profile data",
                location=self.url,
                status=e.response.status_code,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise SourceUnavailable(
                "Failed to fetch profile data", location=self.url, original_error=e
            ) from e


def source_for(location: Union[str, Path]):
    """
    Pick a Source for a location string.

    Args:
        location: http(s) URL or filesystem path

    Returns:
        HttpSource for http/https URLs, FileSource otherwise
    """
    location = str(location)
    if urlparse(location).scheme in ("http", "https"):
        return HttpSource(location)
    return FileSource(location)
