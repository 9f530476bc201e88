"""Process-unique vehicle identifiers."""

import threading


class IdentityGenerator:
    """Issues identifiers of the form ``<prefix><n>`` with n increasing."""

    def __init__(self, prefix: str = "V", start: int = 1):
        self.prefix = prefix
        self._counter = start
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            value = self._counter
            self._counter += 1
        return f"{self.prefix}{value}"


_shared_generator = IdentityGenerator()


def next_id() -> str:
    """Return the next identifier from the shared generator."""
    return _shared_generator.next()
