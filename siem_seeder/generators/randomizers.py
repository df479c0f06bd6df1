"""Random data generation utilities."""

import random
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, TypeVar

from siem_seeder.exceptions import EmptyCandidatesError

T = TypeVar("T")

DEFAULT_WINDOW = timedelta(days=7)


class RandomDataGenerator:
    """Uniform random source for event fields."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        """
        Initialize random data generator.

        Args:
            seed: Optional seed for reproducible output
            rng: Optional Random instance (takes precedence over seed)
        """
        self.rng = rng or random.Random(seed)

    def choice(self, candidates: Sequence[T], label: str = "candidates") -> T:
        """
        Pick one element uniformly.

        Args:
            candidates: Values to choose from
            label: Name of the candidate set, used in the error message

        Returns:
            The selected value

        Raises:
            EmptyCandidatesError: If candidates is empty
        """
        if not candidates:
            raise EmptyCandidatesError(f"Cannot choose from empty candidate set: {label}")
        return candidates[self.rng.randrange(len(candidates))]

    def timestamp_within(
        self, window: timedelta = DEFAULT_WINDOW, now: Optional[datetime] = None
    ) -> datetime:
        """
        Generate a timestamp uniformly distributed in [now - window, now].

        Args:
            window: Length of the look-back window
            now: Reference time (defaults to the current UTC time)

        Returns:
            Timezone-aware UTC datetime
        """
        if window < timedelta(0):
            raise ValueError(f"Time window cannot be negative: {window}")
        now = now or datetime.now(timezone.utc)
        return now - window * self.rng.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.rng.random() < probability

    def integer(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from [low, high]."""
        return self.rng.randint(low, high)
