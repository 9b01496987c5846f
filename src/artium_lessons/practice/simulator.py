"""
Simulated practice upload.

Stands in for a real upload: progress advances in fixed steps separated by
a fixed delay, then an outcome strategy picks the terminal result.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Awaitable, Callable, Iterator, Optional


logger = logging.getLogger(__name__)


class TerminalOutcome(Enum):
    """Final resolution of an upload attempt."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


OutcomeStrategy = Callable[[], TerminalOutcome]


def random_outcome(rng: Optional[random.Random] = None) -> OutcomeStrategy:
    """
    Strategy choosing SUCCEEDED or FAILED with equal probability.

    Args:
        rng: Random source (default: module-level random)
    """
    source = rng or random

    def choose() -> TerminalOutcome:
        return source.choice([TerminalOutcome.SUCCEEDED, TerminalOutcome.FAILED])

    return choose


def fixed_outcome(outcome: TerminalOutcome) -> OutcomeStrategy:
    """Strategy that always returns ``outcome``."""
    return lambda: outcome


class SubmissionSimulator:
    """
    Time-stepped upload simulation.

    Each run reports 5, 10, ... 100 (for the default step) to the progress
    callback, sleeping ``interval`` seconds before each step, then returns
    the strategy's outcome. Cancelling the awaiting task stops the run at
    the next sleep; no further progress is reported.

    Examples:
        >>> simulator = SubmissionSimulator(
        ...     outcome_strategy=fixed_outcome(TerminalOutcome.SUCCEEDED),
        ...     interval=0
        ... )
        >>> outcome = await simulator.run(lambda percent: print(percent))
    """

    DEFAULT_STEP = 5
    DEFAULT_INTERVAL = 0.1  # seconds

    def __init__(
        self,
        outcome_strategy: Optional[OutcomeStrategy] = None,
        interval: float = DEFAULT_INTERVAL,
        step: int = DEFAULT_STEP,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Initialize the simulator.

        Args:
            outcome_strategy: Picks the terminal outcome (default: random_outcome())
            interval: Delay before each progress step, in seconds
            step: Progress increment; must divide 100
            sleep: Awaitable delay function

        Raises:
            ValueError: If step does not divide 100 or interval is negative
        """
        if step <= 0 or 100 % step != 0:
            raise ValueError(f"Progress step must be a positive divisor of 100, got {step}")
        if interval < 0:
            raise ValueError(f"Progress interval must not be negative, got {interval}")

        self.outcome_strategy = outcome_strategy or random_outcome()
        self.interval = interval
        self.step = step
        self._sleep = sleep

    def progress_steps(self) -> Iterator[int]:
        """Lazy, single-use sequence of progress values ending at 100."""
        percent = 0
        while percent < 100:
            percent += self.step
            yield percent

    async def run(self, on_progress: Callable[[int], None]) -> TerminalOutcome:
        """
        Run one simulated upload.

        Args:
            on_progress: Called with each progress value, in increasing order

        Returns:
            The terminal outcome chosen after progress reaches 100
        """
        for percent in self.progress_steps():
            await self._sleep(self.interval)
            on_progress(percent)

        outcome = self.outcome_strategy()
        logger.debug(f"Simulated upload finished: {outcome.value}")
        return outcome
