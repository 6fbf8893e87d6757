import logging
import time
from collections import namedtuple

from .locks import ReadWriteLock
from .probe import ProbeInvocationError

log = logging.getLogger(__name__)

# Immutable; a refresh swaps in a new instance rather than mutating this one.
CachedResult = namedtuple('CachedResult', ['output', 'fetched_at'])

DEFAULT_TTL = 60


class ResultCache:
    """Single-slot cache in front of an expensive probe call.

    Fresh hits only take the shared lock. On a miss the probe runs with no
    lock held, so concurrent misses may each invoke it; the exclusive lock
    covers just the swap, and the last commit wins.
    """

    def __init__(self, fetch, ttl=DEFAULT_TTL, clock=time.monotonic):
        self._fetch = fetch
        self._ttl = ttl
        self._clock = clock
        self._entry = None
        self._lock = ReadWriteLock()

    @property
    def ttl(self):
        return self._ttl

    def snapshot(self):
        with self._lock.read_locked():
            return self._entry

    def age(self):
        """Seconds since the current entry was fetched, or None when empty."""
        entry = self.snapshot()
        if entry is None:
            return None
        return self._clock() - entry.fetched_at

    def get(self):
        """Return (output, error). Exactly one of the two is None."""
        with self._lock.read_locked():
            entry = self._entry
            if entry is not None and self._clock() - entry.fetched_at < self._ttl:
                log.debug('Cache hit (age %.1fs)', self._clock() - entry.fetched_at)
                return entry.output, None

        log.info('Cache miss or expired, running probe')
        try:
            output = self._fetch()
        except ProbeInvocationError as exc:
            # Stale entry stays in place; nothing is evicted on failure.
            return None, exc

        with self._lock.write_locked():
            self._entry = CachedResult(output, self._clock())
        return output, None
