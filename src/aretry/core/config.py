r"""Default values for retry policies.

The defaults describe a policy that retries without a bound, without
any delay between attempts, and that only treats raised errors and
``None`` results as failures.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_TIME_UNIT",
]

import math
import sys

from aretry.units import TimeUnit

# Largest attempt budget; used when no budget is configured
# ("until complete")
DEFAULT_MAX_ATTEMPTS = sys.maxsize

# Delay in seconds before the first retry
DEFAULT_INITIAL_DELAY = 0.0

# Ceiling in seconds for exponentially growing delays
DEFAULT_MAX_DELAY = math.inf

# Unit applied to builder delay values when none is chosen explicitly
DEFAULT_TIME_UNIT = TimeUnit.MILLISECONDS
