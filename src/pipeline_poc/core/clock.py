"""Process-wide wall clock whose readings never go backwards."""

import logging
import threading
import time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone_name

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000


class SystemClock:
    """Wall clock clamped to the highest reading handed out so far.

    If the host clock is stepped back, callers keep seeing the last
    reading until real time catches up again.
    """

    def __init__(self, time_source: Callable[[], int] = time.time_ns):
        self._time_source = time_source
        self._lock = threading.Lock()
        self._last_ns = 0

    def epoch_nanos(self) -> int:
        with self._lock:
            reading = self._time_source()
            if reading < self._last_ns:
                reading = self._last_ns
            self._last_ns = reading
            return reading

    def epoch_millis(self) -> int:
        return self.epoch_nanos() // 1_000_000

    def now(self, zone: Optional[tzinfo] = None) -> datetime:
        """Aware datetime in `zone`, or in the host local zone when None."""
        reading = self.epoch_nanos()
        moment = datetime.fromtimestamp(reading // NANOS_PER_SECOND, tz=timezone.utc) + timedelta(
            microseconds=(reading % NANOS_PER_SECOND) // 1000
        )
        return moment.astimezone(zone)


def local_zone_name() -> Optional[str]:
    """IANA id of the host zone, from `TZ` or the system configuration."""
    try:
        return get_localzone_name()
    except (LookupError, ValueError) as e:
        logger.warning(f"Could not determine host time zone: {e}")
        return None


def resolve_zone(name: Optional[str]) -> Optional[tzinfo]:
    """Look up an IANA zone; None selects the host zone.

    Returns None only when the host zone has no usable IANA id, in which
    case callers fall back to the system local offset.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If an explicit zone id is unknown.
    """
    if name is not None and name.strip():
        return ZoneInfo(name.strip())

    host_zone = local_zone_name()
    if not host_zone:
        return None
    try:
        return ZoneInfo(host_zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Host time zone {host_zone!r} is not a known zone: {e}")
        return None


def zone_id(moment: datetime) -> str:
    """Identifier of the zone `moment` is expressed in."""
    key = getattr(moment.tzinfo, "key", None)
    if key:
        return key
    return moment.tzname() or "UTC"


# Shared by the response assembler and the error payload builder
system_clock = SystemClock()
