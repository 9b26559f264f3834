import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ClientWindow:
    requests: int
    window_start: float


class RateLimiter:
    """Fixed-quota per-client counter whose window resets after it expires.

    A client gets ``limit`` requests per ``window`` seconds, counted from its
    first request in the window. Bursts straddling a reset can reach twice
    the nominal rate. Windows are kept for the life of the limiter unless
    ``sweep_interval`` is set, in which case expired ones are dropped at most
    once per interval.
    """

    def __init__(
        self,
        limit: int = 10,
        window: float = 60.0,
        sweep_interval: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window = window
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._clients: dict[str, ClientWindow] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def allow(self, client_key: str) -> bool:
        with self._lock:
            now = self._clock()
            if self.sweep_interval > 0 and now - self._last_sweep >= self.sweep_interval:
                self._sweep(now)

            client = self._clients.get(client_key)
            if client is None:
                self._clients[client_key] = ClientWindow(requests=1, window_start=now)
                return True

            if now - client.window_start >= self.window:
                client.requests = 1
                client.window_start = now
                return True

            if client.requests >= self.limit:
                logger.info("Rate limit exceeded for %s", client_key)
                return False

            client.requests += 1
            return True

    def sweep(self) -> int:
        """Drop expired windows and return how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def _sweep(self, now: float) -> int:
        expired = [
            key
            for key, client in self._clients.items()
            if now - client.window_start >= self.window
        ]
        for key in expired:
            del self._clients[key]
        self._last_sweep = now
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)
