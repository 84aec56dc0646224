"""Tests for backoff configuration and policy."""

import pytest

from dynamo_batch_tool.batch.constants import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_BACKOFF_INITIAL,
    DEFAULT_BACKOFF_MAX,
)
from dynamo_batch_tool.batch.core.backoff import (
    BackoffConfig,
    BackoffPolicy,
    configure,
    get_config,
)
from dynamo_batch_tool.batch.exceptions import ConfigurationError, RetryRoundsExhaustedError


class TestConfigure:
    """Tests for configure()."""

    def test_defaults(self):
        config = get_config()
        assert config.backoff_initial == DEFAULT_BACKOFF_INITIAL == 1000
        assert config.backoff_max == DEFAULT_BACKOFF_MAX == 30000
        assert config.backoff_factor == DEFAULT_BACKOFF_FACTOR == 2

    def test_unspecified_fields_unchanged(self):
        configure(backoff_initial=50)
        configure(backoff_factor=3)
        config = get_config()
        assert config.backoff_initial == 50
        assert config.backoff_max == DEFAULT_BACKOFF_MAX
        assert config.backoff_factor == 3

    def test_no_arguments_is_noop(self):
        before = get_config()
        assert configure() == before

    def test_existing_snapshot_not_mutated(self):
        snapshot = get_config()
        configure(backoff_initial=10)
        assert snapshot.backoff_initial == DEFAULT_BACKOFF_INITIAL

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"backoff_initial": 0},
            {"backoff_initial": 40000},
            {"backoff_max": 500},
            {"backoff_factor": 0.5},
        ],
    )
    def test_invalid_configuration_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            configure(**kwargs)
        assert get_config() == BackoffConfig()


class TestBackoffPolicy:
    """Tests for BackoffPolicy."""

    def test_waits_grow_exponentially_then_cap(self, sleep, sleeps):
        policy = BackoffPolicy(BackoffConfig(1000, 30000, 2), sleep)
        for _ in range(6):
            policy.failure()
        assert sleeps == [1.0, 2.0, 4.0, 8.0, 16.0, 30.0]
        assert policy.backoff == 30000

    def test_success_resets_without_waiting(self, sleep, sleeps):
        policy = BackoffPolicy(BackoffConfig(1000, 30000, 2), sleep)
        policy.failure()
        policy.failure()
        policy.success()
        assert sleeps == [1.0, 2.0]
        assert policy.backoff == 1000

        policy.failure()
        assert sleeps == [1.0, 2.0, 1.0]

    def test_backoff_stays_within_bounds(self, sleep):
        config = BackoffConfig(100, 250, 3)
        policy = BackoffPolicy(config, sleep)
        for _ in range(5):
            policy.failure()
            assert config.backoff_initial <= policy.backoff <= config.backoff_max

    def test_retry_rounds_exhausted(self, sleep, sleeps):
        policy = BackoffPolicy(BackoffConfig(), sleep, max_retry_rounds=2)
        policy.failure()
        policy.failure()
        with pytest.raises(RetryRoundsExhaustedError):
            policy.failure()
        assert len(sleeps) == 2

    def test_success_resets_retry_rounds(self, sleep):
        policy = BackoffPolicy(BackoffConfig(), sleep, max_retry_rounds=1)
        policy.failure()
        policy.success()
        policy.failure()
        assert policy.failures == 1

    def test_invalid_config_rejected(self, sleep, sleeps):
        with pytest.raises(ConfigurationError):
            BackoffPolicy(BackoffConfig(1000, 500), sleep)
        assert sleeps == []
