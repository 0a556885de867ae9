r"""Unit tests for synchronous retry executor."""

from __future__ import annotations

import logging
import time
from unittest.mock import Mock, call

import pytest

from aretry.backoff import ConstantBackoff, DelayGrowth, ExponentialBackoff
from aretry.outcome import Empty, Errored, RejectedValue
from aretry.retry import RetryExecutor, RetryPolicy
from aretry.utils.sleep import CancellationToken
from tests.helpers import AlwaysRaising, FlakyOperation, ScriptedOperation, sleep_durations


def test_retry_executor_creation() -> None:
    """Test RetryExecutor initialization."""
    policy = RetryPolicy(operation=Mock(), rejection_predicates=(bool,), failure_hooks=(print,))
    executor = RetryExecutor(policy)

    assert executor.policy is policy
    assert isinstance(executor.backoff, ConstantBackoff)
    assert executor.classifier.rejection_predicates == (bool,)
    assert executor.hooks.hooks == (print,)


def test_retry_executor_exponential_backoff() -> None:
    """Test that exponential growth uses the policy ceiling."""
    policy = RetryPolicy(
        operation=Mock(), initial_delay=1.0, max_delay=4.0, delay_growth=DelayGrowth.EXPONENTIAL
    )
    executor = RetryExecutor(policy)

    assert isinstance(executor.backoff, ExponentialBackoff)
    assert executor.backoff.max_delay == 4.0


def test_execute_zero_attempts_never_invokes(mock_sleep: Mock) -> None:
    """Test that an empty budget returns None without any attempt."""
    operation = Mock(return_value=1)
    hook = Mock()
    policy = RetryPolicy(operation=operation, max_attempts=0, failure_hooks=(hook,))

    assert RetryExecutor(policy).execute() is None
    operation.assert_not_called()
    hook.assert_not_called()
    mock_sleep.assert_not_called()


def test_execute_first_attempt_success(mock_sleep: Mock) -> None:
    """Test that a successful first attempt returns without waiting."""
    operation = Mock(return_value="value")
    policy = RetryPolicy(operation=operation, max_attempts=3, initial_delay=5.0)

    assert RetryExecutor(policy).execute() == "value"
    operation.assert_called_once_with()
    mock_sleep.assert_not_called()


@pytest.mark.parametrize(("failures", "max_attempts"), [(1, 3), (2, 3), (4, 5), (0, 1)])
def test_execute_succeeds_on_kth_attempt(
    mock_sleep: Mock, failures: int, max_attempts: int
) -> None:
    """Test that success on attempt k invokes the operation exactly k
    times."""
    operation = FlakyOperation(failures=failures, value=f"value-{failures + 1}")
    policy = RetryPolicy(operation=operation, max_attempts=max_attempts)

    assert RetryExecutor(policy).execute() == f"value-{failures + 1}"
    assert operation.calls == failures + 1
    assert mock_sleep.call_count == failures


@pytest.mark.parametrize("max_attempts", [1, 2, 5])
def test_execute_always_raising_exhausts_budget(mock_sleep: Mock, max_attempts: int) -> None:
    """Test that an always failing operation is invoked N times with N
    hook calls."""
    error = ConnectionError("down")
    operation = AlwaysRaising(error)
    hook = Mock()
    policy = RetryPolicy(operation=operation, max_attempts=max_attempts, failure_hooks=(hook,))

    assert RetryExecutor(policy).execute() is None
    assert operation.calls == max_attempts
    assert hook.call_count == max_attempts
    hook.assert_called_with(Errored(error))
    assert mock_sleep.call_count == max_attempts - 1


def test_execute_rejected_values_exhaust_budget(mock_sleep: Mock) -> None:
    """Test that rejecting every value exhausts the budget and reports
    RejectedValue."""
    operation = Mock(return_value=10)
    hook = Mock()
    policy = RetryPolicy(
        operation=operation,
        max_attempts=4,
        rejection_predicates=(lambda value: value is not None,),
        failure_hooks=(hook,),
    )

    assert RetryExecutor(policy).execute() is None
    assert operation.call_count == 4
    assert hook.call_args_list == [call(RejectedValue(10))] * 4


def test_execute_empty_result_is_retried(mock_sleep: Mock) -> None:
    """Test that None results are failures even without predicates."""
    operation = ScriptedOperation([None, None, "found"])
    hook = Mock()
    policy = RetryPolicy(operation=operation, max_attempts=5, failure_hooks=(hook,))

    assert RetryExecutor(policy).execute() == "found"
    assert operation.calls == 3
    assert hook.call_args_list == [call(Empty()), call(Empty())]


def test_execute_predicates_are_ored(mock_sleep: Mock) -> None:
    """Test that a value is accepted only if no predicate rejects it."""
    operation = ScriptedOperation([950, 120, 480, 600])
    rejected = []
    policy = RetryPolicy(
        operation=operation,
        max_attempts=10,
        rejection_predicates=(lambda value: value > 900, lambda value: value < 400),
        failure_hooks=(rejected.append,),
    )

    assert RetryExecutor(policy).execute() == 480
    assert rejected == [RejectedValue(950), RejectedValue(120)]


def test_execute_hooks_receive_each_failure_kind(mock_sleep: Mock) -> None:
    """Test that hooks receive the outcome variant of every failure."""
    error = ValueError("bad")
    operation = ScriptedOperation([error, None, -1, 5])
    outcomes = []
    policy = RetryPolicy(
        operation=operation,
        max_attempts=4,
        rejection_predicates=(lambda value: value < 0,),
        failure_hooks=(outcomes.append,),
    )

    assert RetryExecutor(policy).execute() == 5
    assert outcomes == [Errored(error), Empty(), RejectedValue(-1)]


def test_execute_raising_hook_does_not_abort(
    mock_sleep: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that a hook raising an error cannot stop the retries."""
    operation = FlakyOperation(failures=2, value="ok")
    hook = Mock(side_effect=RuntimeError("broken hook"))
    policy = RetryPolicy(operation=operation, max_attempts=3, failure_hooks=(hook,))

    with caplog.at_level(logging.WARNING):
        assert RetryExecutor(policy).execute() == "ok"
    assert hook.call_count == 2
    assert "broken hook" in caplog.text


def test_execute_hooks_run_before_next_attempt(mock_sleep: Mock) -> None:
    """Test that every hook of an attempt returns before the next
    attempt."""
    events = []

    def operation() -> str | None:
        events.append("attempt")
        return None if events.count("attempt") < 3 else "done"

    policy = RetryPolicy(
        operation=operation,
        max_attempts=3,
        failure_hooks=(
            lambda outcome: events.append("first"),
            lambda outcome: events.append("second"),
        ),
    )

    assert RetryExecutor(policy).execute() == "done"
    assert events == ["attempt", "first", "second", "attempt", "first", "second", "attempt"]


def test_execute_constant_delays(mock_sleep: Mock) -> None:
    """Test that constant backoff sleeps the same delay before every
    retry."""
    policy = RetryPolicy(operation=AlwaysRaising(), max_attempts=4, initial_delay=0.2)

    RetryExecutor(policy).execute()
    assert sleep_durations(mock_sleep) == [0.2, 0.2, 0.2]


def test_execute_exponential_delays(mock_sleep: Mock) -> None:
    """Test the sequence d0, min(2 * d0, dmax), min(4 * d0, dmax), ..."""
    policy = RetryPolicy(
        operation=AlwaysRaising(),
        max_attempts=7,
        initial_delay=0.5,
        max_delay=3.0,
        delay_growth=DelayGrowth.EXPONENTIAL,
    )

    RetryExecutor(policy).execute()
    assert sleep_durations(mock_sleep) == [0.5, 1.0, 2.0, 3.0, 3.0, 3.0]


def test_execute_exponential_delays_unbounded(mock_sleep: Mock) -> None:
    """Test that delays keep doubling without a ceiling."""
    policy = RetryPolicy(
        operation=AlwaysRaising(),
        max_attempts=5,
        initial_delay=1.0,
        delay_growth=DelayGrowth.EXPONENTIAL,
    )

    RetryExecutor(policy).execute()
    assert sleep_durations(mock_sleep) == [1.0, 2.0, 4.0, 8.0]


def test_execute_measured_constant_delays() -> None:
    """Test that the measured time between attempts matches the constant
    delay."""
    operation = AlwaysRaising()
    policy = RetryPolicy(operation=operation, max_attempts=4, initial_delay=0.05)

    RetryExecutor(policy).execute()
    gaps = operation.gaps()
    assert len(gaps) == 3
    for gap in gaps:
        assert gap >= 0.045
        assert gap < 1.0


def test_execute_policy_state_resets_between_runs(mock_sleep: Mock) -> None:
    """Test that every execution starts from the initial delay."""
    policy = RetryPolicy(
        operation=AlwaysRaising(),
        max_attempts=3,
        initial_delay=1.0,
        delay_growth=DelayGrowth.EXPONENTIAL,
    )
    executor = RetryExecutor(policy)

    executor.execute()
    executor.execute()
    assert sleep_durations(mock_sleep) == [1.0, 2.0, 1.0, 2.0]


def test_execute_cancelled_token_stops_before_retry() -> None:
    """Test that a cancelled token ends the loop with None after the
    current attempt."""
    token = CancellationToken()
    operation = Mock(side_effect=lambda: token.cancel())
    policy = RetryPolicy(operation=operation, max_attempts=10, initial_delay=30.0)

    start = time.monotonic()
    assert RetryExecutor(policy).execute(token) is None
    assert time.monotonic() - start < 10.0
    operation.assert_called_once_with()


def test_execute_unbounded_until_success(mock_sleep: Mock) -> None:
    """Test that the default budget retries until an attempt is
    accepted."""
    operation = FlakyOperation(failures=50, value="finally")
    policy = RetryPolicy(operation=operation)

    assert RetryExecutor(policy).execute() == "finally"
    assert operation.calls == 51


def test_execute_does_not_capture_base_exceptions(mock_sleep: Mock) -> None:
    """Test that interpreter-level exceptions propagate."""
    policy = RetryPolicy(operation=Mock(side_effect=KeyboardInterrupt), max_attempts=3)
    with pytest.raises(KeyboardInterrupt):
        RetryExecutor(policy).execute()
