"""
Backoff between retry rounds of bulk operations.

The process-wide configuration is an immutable snapshot. configure() swaps in a
new snapshot; bulk calls read it once when they start, so a change only affects
calls started afterwards.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..constants import DEFAULT_BACKOFF_FACTOR, DEFAULT_BACKOFF_INITIAL, DEFAULT_BACKOFF_MAX
from ..exceptions import ConfigurationError, RetryRoundsExhaustedError
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BackoffConfig:
    """Backoff tuning, in milliseconds.

    The first wait is backoff_initial; each consecutive wait is
    min(previous * backoff_factor, backoff_max).
    """

    backoff_initial: float = DEFAULT_BACKOFF_INITIAL
    backoff_max: float = DEFAULT_BACKOFF_MAX
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR

    def validate(self) -> "BackoffConfig":
        """
        Check the invariants initial > 0, max >= initial and factor >= 1.

        Returns:
            The config itself

        Raises:
            ConfigurationError: If any invariant does not hold
        """
        if self.backoff_initial <= 0:
            raise ConfigurationError(
                f"backoff_initial must be positive, got {self.backoff_initial}"
            )
        if self.backoff_max < self.backoff_initial:
            raise ConfigurationError(
                f"backoff_max ({self.backoff_max}) must be >= "
                f"backoff_initial ({self.backoff_initial})"
            )
        if self.backoff_factor < 1:
            raise ConfigurationError(f"backoff_factor must be >= 1, got {self.backoff_factor}")
        return self


_config = BackoffConfig()


def get_config() -> BackoffConfig:
    """Return the current process-wide backoff configuration."""
    return _config


def configure(
    backoff_initial: float | None = None,
    backoff_max: float | None = None,
    backoff_factor: float | None = None,
) -> BackoffConfig:
    """
    Configure process-wide backoff settings. Unspecified settings are unchanged.

    Args:
        backoff_initial: Initial wait in milliseconds
        backoff_max: Maximum wait in milliseconds
        backoff_factor: Growth factor between consecutive waits

    Returns:
        The new configuration

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    global _config

    changes: dict[str, float] = {}
    if backoff_initial is not None:
        changes["backoff_initial"] = backoff_initial
    if backoff_max is not None:
        changes["backoff_max"] = backoff_max
    if backoff_factor is not None:
        changes["backoff_factor"] = backoff_factor

    new_config = replace(_config, **changes).validate()
    _config = new_config
    logger.debug(f"Backoff configured: {new_config}")
    return new_config


def reset_config() -> BackoffConfig:
    """Restore the default backoff configuration."""
    global _config
    _config = BackoffConfig()
    return _config


class BackoffPolicy:
    """Backoff state for a single bulk call.

    failure() waits the current backoff and grows it; success() resets it.
    """

    def __init__(
        self,
        config: BackoffConfig,
        sleep: Callable[[float], None] = time.sleep,
        max_retry_rounds: int | None = None,
    ):
        """
        Initialize backoff state.

        Args:
            config: Backoff tuning (milliseconds)
            sleep: Wait function taking seconds
            max_retry_rounds: Consecutive failure rounds allowed (None for unlimited)

        Raises:
            ConfigurationError: If config breaks the backoff invariants
        """
        self.config = config.validate()
        self.backoff = config.backoff_initial
        self.failures = 0
        self.max_retry_rounds = max_retry_rounds
        self._sleep = sleep

    def failure(self) -> None:
        """
        Wait for the current backoff, then grow it up to the maximum.

        Raises:
            RetryRoundsExhaustedError: If max_retry_rounds consecutive failures already happened
        """
        self.failures += 1
        if self.max_retry_rounds is not None and self.failures > self.max_retry_rounds:
            raise RetryRoundsExhaustedError(
                f"Unprocessed entries remain after {self.max_retry_rounds} retry rounds"
            )

        logger.debug(f"Unprocessed entries, backing off for {self.backoff}ms")
        self._sleep(self.backoff / 1000)
        self.backoff = min(self.backoff * self.config.backoff_factor, self.config.backoff_max)

    def success(self) -> None:
        """Reset the backoff after a round without unprocessed entries."""
        self.backoff = self.config.backoff_initial
        self.failures = 0
