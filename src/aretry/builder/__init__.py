r"""Staged builder for retry policies."""

from __future__ import annotations

__all__ = ["RetryBuilder", "new_retry"]

from aretry.builder.builder import RetryBuilder, new_retry
