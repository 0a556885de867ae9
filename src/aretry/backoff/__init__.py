r"""Backoff strategies for delays between retry attempts.

This package provides the constant and exponential backoff strategies
and the factory that picks one for a retry policy.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "DelayGrowth",
    "ExponentialBackoff",
    "create_backoff",
]

from aretry.backoff.base import BaseBackoffStrategy, DelayGrowth
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.factory import create_backoff
