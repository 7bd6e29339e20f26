"""Remote time source — AlAdhan API client with a TTL cache, and the local-calculation fallback."""

import logging
import os
import re
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Protocol

import httpx

from hilal import prayer
from hilal.methods import AsrConvention, CalculationMethod
from hilal.models import CalendarDate, GeoLocation, PrayerTimeSet
from hilal.numeric import hhmm_to_minutes, minutes_to_hhmm
from hilal.policy import HilalError, Strictness

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.aladhan.com/v1"
DEFAULT_TIMEOUT = 10.0
DEFAULT_CACHE_TTL = 6 * 60 * 60

_ZONE_SUFFIX = re.compile(r"\s*\([^)]+\)\s*")

_TIMING_KEYS = {
    "fajr": "Fajr",
    "sunrise": "Sunrise",
    "dhuhr": "Dhuhr",
    "asr": "Asr",
    "maghrib": "Maghrib",
    "isha": "Isha",
}

_CacheKey = tuple[
    float, float, float, str | None, CalendarDate, CalculationMethod, AsrConvention
]


class RemoteTimesUnavailable(HilalError):
    """Remote source call failure (transport error or non-200 response)."""


class RemoteTimeSource(Protocol):
    def fetch_remote_times(
        self,
        location: GeoLocation,
        date: CalendarDate,
        method: CalculationMethod,
        asr_convention: AsrConvention = AsrConvention.STANDARD,
    ) -> PrayerTimeSet | None: ...


def extract_time(value: str) -> str:
    """Strip a zone suffix: "05:14 (NZDT)" → "05:14"."""
    return _ZONE_SUFFIX.sub("", value).strip()


class AlAdhanClient:
    """Fetches daily timings from api.aladhan.com.

    Successful results are cached for `ttl` seconds per (coordinate, timezone,
    date, method, convention); expired entries are swept on every insert.
    Concurrent calls for the same key wait on a single request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        ttl: float | None = None,
        client: httpx.Client | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = (
            base_url or os.environ.get("ALADHAN_API_URL") or DEFAULT_BASE_URL
        ).rstrip("/")
        self.timeout = (
            timeout
            if timeout is not None
            else float(os.environ.get("ALADHAN_TIMEOUT", DEFAULT_TIMEOUT))
        )
        self.ttl = (
            ttl
            if ttl is not None
            else float(os.environ.get("ALADHAN_CACHE_TTL", DEFAULT_CACHE_TTL))
        )
        self._client = client or httpx.Client(
            timeout=self.timeout, headers={"Accept": "application/json"}
        )
        self._clock = clock
        self._cache: dict[_CacheKey, tuple[float, PrayerTimeSet]] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[_CacheKey, tuple[threading.Lock, int]] = {}

    def __enter__(self) -> "AlAdhanClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_remote_times(
        self,
        location: GeoLocation,
        date: CalendarDate,
        method: CalculationMethod = CalculationMethod.MWL,
        asr_convention: AsrConvention = AsrConvention.STANDARD,
    ) -> PrayerTimeSet | None:
        """Daily times from AlAdhan, served from cache when fresh.

        Args:
            location: Observer position. Its IANA timezone, when present, is
                sent so the API answers in that zone; a fixed-offset location
                is fetched in UTC and shifted by its offset.
            date: Gregorian date.
            method: Calculation method, mapped to AlAdhan's method id.
            asr_convention: Mapped to AlAdhan's `school` parameter.

        Returns:
            PrayerTimeSet with source "aladhan", or None when the response
            carries no usable timings.

        Raises:
            RemoteTimesUnavailable: Transport error or non-200 status.
        """
        key = (
            location.latitude,
            location.longitude,
            location.timezone_offset_hours,
            location.timezone,
            date,
            method,
            asr_convention,
        )
        with self._key_lock(key):
            cached = self._cached(key)
            if cached is not None:
                return cached

            result = self._request(location, date, method, asr_convention)
            if result is not None:
                with self._lock:
                    now = self._clock()
                    self._sweep(now)
                    self._cache[key] = (now + self.ttl, result)
            return result

    @contextmanager
    def _key_lock(self, key: _CacheKey) -> Iterator[None]:
        """Hold the lock for one key; it is dropped once no caller holds or waits on it."""
        with self._lock:
            lock, users = self._key_locks.get(key, (threading.Lock(), 0))
            self._key_locks[key] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._lock:
                lock, users = self._key_locks[key]
                if users == 1:
                    del self._key_locks[key]
                else:
                    self._key_locks[key] = (lock, users - 1)

    def _sweep(self, now: float) -> None:
        # caller holds self._lock
        expired = [k for k, (expires_at, _) in self._cache.items() if now >= expires_at]
        for k in expired:
            del self._cache[k]

    def _cached(self, key: _CacheKey) -> PrayerTimeSet | None:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            expires_at, result = entry
            if self._clock() >= expires_at:
                del self._cache[key]
                return None
            return result

    def _request(
        self,
        location: GeoLocation,
        date: CalendarDate,
        method: CalculationMethod,
        asr_convention: AsrConvention,
    ) -> PrayerTimeSet | None:
        """Single API call. Returns None on a body without timings, raises on failure."""
        url = f"{self.base_url}/timings/{date.day:02d}-{date.month:02d}-{date.year:04d}"
        params: dict[str, str | int | float] = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "method": method.params.aladhan_id,
            "school": 1 if asr_convention is AsrConvention.HANAFI else 0,
            "timezonestring": location.timezone or "UTC",
        }
        shift_minutes = (
            0 if location.timezone else round(location.timezone_offset_hours * 60)
        )

        try:
            resp = self._client.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteTimesUnavailable(f"AlAdhan request failed: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        timings = data.get("timings") if isinstance(data, dict) else None
        if not timings:
            return None
        try:
            times_24h = {
                name: minutes_to_hhmm(
                    hhmm_to_minutes(extract_time(timings[api_key])) + shift_minutes
                )
                for name, api_key in _TIMING_KEYS.items()
            }
            return PrayerTimeSet.from_clock(
                times_24h,
                date=date,
                location=location,
                method=method,
                asr_convention=asr_convention,
                source="aladhan",
            )
        except (KeyError, ValueError):
            logger.debug("Unparseable AlAdhan timings: %r", timings)
            return None


def prayer_times_with_fallback(
    source: RemoteTimeSource,
    location: GeoLocation,
    date: CalendarDate,
    method: CalculationMethod = CalculationMethod.MWL,
    asr_convention: AsrConvention = AsrConvention.STANDARD,
    strictness: Strictness = Strictness.LENIENT,
) -> PrayerTimeSet:
    """Prefer the remote source; calculate locally when it is unavailable.

    Returns:
        Remote PrayerTimeSet, or one from prayer.calculate with source "calculation".
    """
    try:
        times = source.fetch_remote_times(location, date, method, asr_convention)
    except RemoteTimesUnavailable as e:
        logger.warning("Remote prayer times unavailable, calculating locally: %s", e)
        times = None
    else:
        if times is None:
            logger.warning(
                "Remote source had no timings for %s, calculating locally",
                date.isoformat(),
            )

    if times is None:
        return prayer.calculate(location, date, method, asr_convention, strictness)
    return times
