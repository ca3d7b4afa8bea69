"""Outcome executors that hand UI commands to the playback backend."""

from __future__ import annotations

import logging
from typing import Protocol

from playdeck.outcomes import Outcome, describe_outcome

logger = logging.getLogger(__name__)


class OutcomeExecutor(Protocol):
    def execute(self, outcome: Outcome) -> None: ...


class LoggingExecutor:
    """Executor that records and logs outcomes without a backend."""

    def __init__(self) -> None:
        self.executed: list[Outcome] = []

    def execute(self, outcome: Outcome) -> None:
        self.executed.append(outcome)
        logger.info("Outcome: %s", describe_outcome(outcome))
