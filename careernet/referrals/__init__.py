"""Referral request timing and follow-up rules."""

from .timing import (
    FollowUpDecision,
    ReferralStatus,
    TimingSuggestion,
    calculate_optimal_referral_timing,
    should_follow_up,
)

__all__ = [
    "FollowUpDecision",
    "ReferralStatus",
    "TimingSuggestion",
    "calculate_optimal_referral_timing",
    "should_follow_up",
]
