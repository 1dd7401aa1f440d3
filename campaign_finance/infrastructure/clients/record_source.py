"""Sources of the raw weball text: local file or HTTP download"""

from pathlib import Path
from typing import Protocol

import httpx
from starlette.concurrency import run_in_threadpool

from campaign_finance.config import settings
from campaign_finance.domain.exceptions import RecordSourceError


class RecordSource(Protocol):
    """Anything that can hand over the raw bulk-file text"""

    @property
    def identity(self) -> str: ...

    async def read_text(self) -> str: ...


class FileRecordSource:
    """Reads the bulk file from disk"""

    def __init__(self, path: str | Path | None = None, encoding: str = "utf-8"):
        self.path = Path(path or settings.data_path)
        self.encoding = encoding

    @property
    def identity(self) -> str:
        return f"file:{self.path.resolve()}"

    async def read_text(self) -> str:
        """
        Read the whole file off the event loop.

        Raises:
            RecordSourceError: File missing or unreadable
        """
        try:
            return await run_in_threadpool(self.path.read_text, encoding=self.encoding, errors="replace")
        except OSError as e:
            raise RecordSourceError(f"Cannot read campaign finance data from {self.path}: {e}") from e


class HttpRecordSource:
    """Downloads the bulk file over HTTP"""

    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.url = url or settings.data_url
        self.timeout = timeout or settings.http_timeout_seconds
        if not self.url:
            raise ValueError("HttpRecordSource requires a URL")

    @property
    def identity(self) -> str:
        return f"url:{self.url}"

    async def read_text(self) -> str:
        """
        Fetch the bulk file body as text.

        Raises:
            RecordSourceError: On timeout, HTTP errors, or network failure
        """
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.text

            except httpx.TimeoutException as e:
                raise RecordSourceError(f"Record source timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise RecordSourceError(f"Record source error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RecordSourceError(f"Record source unreachable: {e}") from e


def default_record_source() -> RecordSource:
    """File source unless only a URL is configured"""
    if settings.data_url and not Path(settings.data_path).exists():
        return HttpRecordSource()
    return FileRecordSource()
