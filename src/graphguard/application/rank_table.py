"""Application layer - Lifetime rank configuration."""

import logging
import threading
from typing import Dict, Mapping, Optional

from graphguard.domain import ILifetimeRankTable, InvalidRankError, Lifetime, LifetimeKind

logger = logging.getLogger(__name__)

DEFAULT_RANKS: Mapping[LifetimeKind, int] = {
    Lifetime.PER_REQUEST: 10,
    Lifetime.PER_SCOPE: 20,
    Lifetime.PER_CONTAINER: 30,
}


class LifetimeRankTable(ILifetimeRankTable):
    """Maps lifetime kinds to how long they live.

    A higher rank means a longer-lived instance. Transient and any lifetime
    without a registered rank are treated as rank 0. Reads and writes are
    guarded by a lock so validation passes running in different threads can
    share one table while ranks are being configured.

    Attributes:
        _ranks: The registered ranks.
        _lock: Lock guarding access to the ranks.
    """

    def __init__(self, ranks: Optional[Mapping[LifetimeKind, int]] = None) -> None:
        """Initialize the table with the given ranks.

        Args:
            ranks: Initial ranks. Defaults to the built-in seed.
        """
        self._lock = threading.RLock()
        self._ranks: Dict[LifetimeKind, int] = {}
        for lifetime, rank in (DEFAULT_RANKS if ranks is None else ranks).items():
            self.set_rank(lifetime, rank)

    def set_rank(self, lifetime: LifetimeKind, rank: int) -> None:
        """Insert or overwrite the rank of a lifetime kind.

        Args:
            lifetime: The lifetime kind to rank.
            rank: Non-negative rank, higher means longer-lived.

        Raises:
            InvalidRankError: If the rank is not a non-negative integer.

        Example:
            >>> table = LifetimeRankTable()
            >>> # Put a custom lifetime between PER_SCOPE and PER_CONTAINER
            >>> table.set_rank(CustomLifetime(name="hourly"), 25)
        """
        if isinstance(rank, bool) or not isinstance(rank, int) or rank < 0:
            raise InvalidRankError(lifetime, rank)
        with self._lock:
            self._ranks[lifetime] = rank
        logger.debug("Lifetime '%s' ranked %d", lifetime, rank)

    def get_rank(self, lifetime: LifetimeKind) -> int:
        with self._lock:
            return self._ranks.get(lifetime, 0)

    def has_rank(self, lifetime: LifetimeKind) -> bool:
        if lifetime == Lifetime.TRANSIENT:
            return True
        with self._lock:
            return lifetime in self._ranks

    def ranks(self) -> Dict[LifetimeKind, int]:
        with self._lock:
            return dict(self._ranks)

    def reset(self) -> None:
        """Restore the built-in seed, dropping any custom ranks.

        Useful for testing.
        """
        with self._lock:
            self._ranks = dict(DEFAULT_RANKS)


default_rank_table = LifetimeRankTable()


def set_rank(lifetime: LifetimeKind, rank: int) -> None:
    """Set the rank of a lifetime kind on the process-wide table."""
    default_rank_table.set_rank(lifetime, rank)


def get_rank(lifetime: LifetimeKind) -> int:
    """Return the rank of a lifetime kind from the process-wide table."""
    return default_rank_table.get_rank(lifetime)
