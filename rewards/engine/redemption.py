#!/usr/bin/env python3
"""
Points Redemption - Quote a checkout discount paid for with reward points.
"""

from typing import Optional
from dataclasses import dataclass
import logging

from rewards.config_loader import RedemptionConfig

logger = logging.getLogger(__name__)


class RedemptionError(Exception):
    """Base exception for invalid redemption requests."""
    pass


class InsufficientPointsError(RedemptionError):
    """Raised when more points are requested than are available."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"You only have {available} points available (requested {requested})")


class InvalidRedemptionError(RedemptionError):
    """Raised for negative amounts."""
    pass


@dataclass(frozen=True)
class RedemptionQuote:
    subtotal: float
    points_used: int
    discount: float
    total: float
    remaining_points: int
    currency: str


def quote_redemption(
    subtotal: float,
    points_requested: int,
    available_points: int,
    config: Optional[RedemptionConfig] = None
) -> RedemptionQuote:
    """
    Price an order after redeeming points.

    Formula:
    - discount = points_requested * point_value
    - total = max(subtotal - discount, 0)

    Raises:
        InvalidRedemptionError: If subtotal or points_requested is negative
        InsufficientPointsError: If points_requested exceeds available_points
    """
    cfg = config or RedemptionConfig()

    if subtotal < 0:
        raise InvalidRedemptionError(f"subtotal must be non-negative, got {subtotal}")
    if points_requested < 0:
        raise InvalidRedemptionError(f"points must be non-negative, got {points_requested}")

    available = max(0, available_points)
    if points_requested > available:
        raise InsufficientPointsError(points_requested, available)

    discount = points_requested * cfg.point_value
    total = max(subtotal - discount, 0.0)

    logger.info(
        f"Redemption quote: {points_requested} points -> {discount:.2f} {cfg.currency} off, "
        f"total {total:.2f} {cfg.currency}"
    )

    return RedemptionQuote(
        subtotal=subtotal,
        points_used=points_requested,
        discount=discount,
        total=total,
        remaining_points=available - points_requested,
        currency=cfg.currency,
    )
