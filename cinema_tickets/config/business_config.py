"""Business rule constants."""

from typing import Final


class PurchaseLimits:
    """Purchase-related business limits."""

    MAX_TICKETS_PER_PURCHASE: Final[int] = 20
    MIN_ACCOUNT_ID: Final[int] = 1
