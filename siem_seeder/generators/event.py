"""Generator for synthetic security events."""

from datetime import timedelta
from typing import Optional

from siem_seeder.generators.randomizers import DEFAULT_WINDOW, RandomDataGenerator
from siem_seeder.models.event import (
    EVENT_TYPES,
    MAX_SEVERITY,
    MIN_SEVERITY,
    AuthenticationEvent,
    Event,
    MalwareEvent,
    ProcessEvent,
)
from siem_seeder.models.vocabulary import Vocabulary

AUTH_FAILURE_RATE = 0.3


class EventGenerator:
    """Builds one random event of a uniformly selected type."""

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        randomizer: Optional[RandomDataGenerator] = None,
        window: timedelta = DEFAULT_WINDOW,
        failure_rate: float = AUTH_FAILURE_RATE,
    ) -> None:
        """
        Initialize event generator.

        Args:
            vocabulary: Candidate values (defaults to the built-in sets)
            randomizer: Optional RandomDataGenerator instance
            window: Look-back window for event timestamps
            failure_rate: Probability that an authentication event fails
        """
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"Failure rate must be between 0 and 1, got {failure_rate}")
        self.vocabulary = vocabulary or Vocabulary()
        self.randomizer = randomizer or RandomDataGenerator()
        self.window = window
        self.failure_rate = failure_rate

    def generate(self) -> Event:
        """
        Generate a single event.

        Returns:
            An AuthenticationEvent, ProcessEvent or MalwareEvent

        Raises:
            EmptyCandidatesError: If a vocabulary list is empty
        """
        event_type = self.randomizer.choice(EVENT_TYPES, "event types")
        vocabulary = self.vocabulary
        common = {
            "timestamp": self.randomizer.timestamp_within(self.window),
            "host": self.randomizer.choice(vocabulary.hosts, "hosts"),
            "user": self.randomizer.choice(vocabulary.users, "users"),
            "source_ip": self.randomizer.choice(vocabulary.source_ips, "source IPs"),
        }

        if event_type == "authentication":
            outcome = "failure" if self.randomizer.chance(self.failure_rate) else "success"
            return AuthenticationEvent(outcome=outcome, **common)
        if event_type == "process":
            return ProcessEvent(
                process_name=self.randomizer.choice(vocabulary.processes, "processes"),
                **common,
            )
        return MalwareEvent(
            malware_name=self.randomizer.choice(vocabulary.malware, "malware"),
            severity=self.randomizer.integer(MIN_SEVERITY, MAX_SEVERITY),
            **common,
        )
