r"""Utility helpers for retry execution."""

from __future__ import annotations

__all__ = ["CancellationToken"]

from aretry.utils.sleep import CancellationToken
