"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.  The
concrete implementation lives in src/infrastructure/persistence/ and is
wired at the application boundary via dependency injection.
"""

from .base import COUNT_UNAVAILABLE, Dao

__all__ = [
    "COUNT_UNAVAILABLE",
    "Dao",
]
