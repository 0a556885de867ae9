r"""Execution of retry policies.

This package holds the frozen retry policy and the components that run
it: an outcome classifier, a failure hook manager, a backoff-aware wait
strategy, and the synchronous and background-thread executors.

Public API:
    - RetryPolicy: Immutable configuration of a retry execution
    - DelayGrowth: Constant or exponential delay growth
    - OutcomeClassifier: Logic for classifying attempts
    - FailureHookManager: Manager for failure hook invocations
    - RetryStrategy: Strategy for waiting between attempts
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Background-thread retry executor
    - RetryFuture: Future returned by AsyncRetryExecutor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "DelayGrowth",
    "FailureHookManager",
    "OutcomeClassifier",
    "RetryExecutor",
    "RetryFuture",
    "RetryPolicy",
    "RetryStrategy",
]

from aretry.retry.config import DelayGrowth, RetryPolicy
from aretry.retry.decider import OutcomeClassifier
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor, RetryFuture
from aretry.retry.manager import FailureHookManager
from aretry.retry.strategy import RetryStrategy
