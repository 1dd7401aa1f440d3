"""Data access layer: cached, parsed campaign finance records"""

import logging
import time
from typing import Optional

from starlette.concurrency import run_in_threadpool

from campaign_finance.domain.exceptions import RecordSourceError
from campaign_finance.domain.models import ParseResult
from campaign_finance.domain.parser import parse_records
from campaign_finance.infrastructure.cache import RecordCache
from campaign_finance.infrastructure.clients.record_source import RecordSource
from campaign_finance.infrastructure.observability.logging import log_load
from campaign_finance.infrastructure.observability.metrics import (
    load_duration_histogram,
    record_load,
    record_source_failure_counter,
)


class FundingDataRepository:
    """Loads the bulk file once per cache window and hands out the parsed batch"""

    def __init__(self, source: RecordSource, cache: RecordCache, cycle: Optional[int] = None):
        self.source = source
        self.cache = cache
        self.cycle = cycle

    async def get_parse_result(self) -> ParseResult:
        """
        Parsed batch for the configured source, shared across concurrent requests.

        Raises:
            RecordSourceError: Source could not be read; nothing is cached
        """
        return await self.cache.get_or_load(self.source.identity, self._load)

    async def _load(self) -> ParseResult:
        start_time = time.time()
        try:
            raw = await self.source.read_text()
        except RecordSourceError as e:
            record_source_failure_counter.inc()
            logging.error(f"Record source error: {e}", extra={"source": self.source.identity})
            raise

        # Multi-megabyte parse runs in a worker thread to keep the event loop free
        result = await run_in_threadpool(parse_records, raw, self.cycle)

        duration = time.time() - start_time
        load_duration_histogram.observe(duration)
        record_load(len(result.records), result.failure_reasons)
        log_load(
            self.source.identity,
            len(result.records),
            result.failure_count,
            result.failure_reasons,
            duration * 1000,
        )
        return result
