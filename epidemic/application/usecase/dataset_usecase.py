import json
import logging
from typing import Callable, Sequence, TypeVar

from config.settings import CacheSettings
from epidemic.application.port.cache_store_port import CacheConnectionPort, CacheStorePort
from epidemic.application.port.disease_data_port import CountrySourcePort
from epidemic.domain.continent_record import ContinentRecord
from epidemic.domain.country_record import CountryRecord
from epidemic.domain.errors import CacheCorruptError, CacheUnavailableError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", CountryRecord, ContinentRecord)


class DatasetUseCase:
    """
    Cache-aside access to the upstream snapshots.

    A non-empty cached snapshot is returned as-is, without checking it against the
    upstream API. How long it stays there is decided by ``CacheSettings.ttl_seconds``
    (or, when that is 0, by the Redis server's own eviction policy).
    """

    def __init__(self, cache_store: CacheStorePort, source: CountrySourcePort, settings: CacheSettings):
        self.cache_store = cache_store
        self.source = source
        self.settings = settings

    def get_all_countries(self) -> list[CountryRecord]:
        return self._get_or_fetch(
            self.settings.snapshot_key, self.source.fetch_countries, CountryRecord.from_payload
        )

    def get_continents(self) -> list[ContinentRecord]:
        return self._get_or_fetch(
            self.settings.continent_key, self.source.fetch_continents, ContinentRecord.from_payload
        )

    def _get_or_fetch(
        self,
        key: str,
        fetcher: Callable[[], list[RecordT]],
        decoder: Callable[[dict], RecordT],
    ) -> list[RecordT]:
        with self.cache_store.connect() as conn:
            cached = self._read_snapshot(conn, key, decoder)
            if cached:
                logger.debug("cache hit for %s (%d records)", key, len(cached))
                return cached

            logger.info("cache miss for %s, fetching upstream", key)
            records = fetcher()
            self._write_snapshot(conn, key, records)
            return records

    def _read_snapshot(
        self, conn: CacheConnectionPort, key: str, decoder: Callable[[dict], RecordT]
    ) -> list[RecordT]:
        payload = conn.get(key)
        if payload is None:
            return []
        try:
            return decode_snapshot(payload, decoder)
        except CacheCorruptError as exc:
            logger.warning("discarding cached %s: %s", key, exc)
            return []

    def _write_snapshot(self, conn: CacheConnectionPort, key: str, records: Sequence) -> None:
        ttl = self.settings.ttl_seconds if self.settings.ttl_seconds > 0 else None
        try:
            conn.set(key, encode_snapshot(records), ttl_seconds=ttl)
        except CacheUnavailableError as exc:
            # The fresh data is still served; the next request retries the write.
            logger.warning("cache write for %s failed: %s", key, exc)


def encode_snapshot(records: Sequence) -> bytes:
    return json.dumps({"data": [record.to_dict() for record in records]}).encode("utf-8")


def decode_snapshot(payload: bytes, decoder: Callable[[dict], RecordT]) -> list[RecordT]:
    try:
        body = json.loads(payload)
        return [decoder(item) for item in body["data"]]
    except (ValueError, TypeError, KeyError, AttributeError) as exc:
        raise CacheCorruptError(f"undecodable snapshot: {exc}") from exc
