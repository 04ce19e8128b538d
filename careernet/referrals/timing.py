"""Suggest when to ask a contact for a referral and when to follow up."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from .config import DEFAULT_TIMING_CONFIG, TimingConfig

_SECONDS_PER_DAY = 86400

# (max days since contact, extra wait days, confidence, reason)
_RECENCY_RULES = (
    (7, 0, 30, "Recent contact (within week) - good timing"),
    (30, 1, 20, "Contact within month - acceptable timing"),
    (90, 3, 10, "Contact within 3 months - consider reconnecting first"),
)
_STALE_CONTACT_REASON = (
    "No recent contact (90+ days) - strongly recommend warming up connection first"
)


class ReferralStatus(Enum):
    """Lifecycle states of a referral request."""

    DRAFT = "draft"
    PENDING = "pending"
    SENT = "sent"
    RESPONDED = "responded"
    DECLINED = "declined"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TimingSuggestion:
    optimal_send_time: datetime
    follow_up_time: datetime
    reasoning: tuple[str, ...]
    confidence: str


@dataclass(frozen=True)
class FollowUpDecision:
    should_follow_up: bool
    reason: str


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, truncated toward zero."""
    return int((later - earlier).total_seconds() / _SECONDS_PER_DAY)


def _confidence_label(score: int, config: TimingConfig) -> str:
    if score >= config.high_confidence:
        return "high"
    if score >= config.medium_confidence:
        return "medium"
    return "low"


def calculate_optimal_referral_timing(
    relationship_strength: int,
    last_contacted_at: datetime | None,
    job_deadline: datetime | None,
    job_created_at: datetime,
    *,
    now: datetime | None = None,
    config: TimingConfig = DEFAULT_TIMING_CONFIG,
) -> TimingSuggestion:
    """Weigh relationship strength, contact recency and deadline urgency.

    Args:
        relationship_strength: 1 (weak) to 5 (strong).
        last_contacted_at: Last interaction with the contact, if any.
        job_deadline: Application deadline, if known.
        job_created_at: When the job was saved.
        now: Reference time; defaults to the current time.

    Returns:
        TimingSuggestion with send and follow-up times, one reason per
        factor, and a high/medium/low confidence label.
    """
    if now is None:
        now = datetime.now(job_created_at.tzinfo)

    reasoning: list[str] = []
    send_in_days = 0
    confidence_score = 0

    if relationship_strength >= config.strong_relationship:
        send_in_days = config.strong_send_days
        reasoning.append("Strong relationship (4-5) - can reach out immediately")
        confidence_score += config.strong_confidence
    elif relationship_strength == config.moderate_relationship:
        send_in_days = config.moderate_send_days
        reasoning.append("Moderate relationship (3) - wait 2 days to prepare approach")
        confidence_score += config.moderate_confidence
    else:
        send_in_days = config.weak_send_days
        reasoning.append(
            "Weak relationship (1-2) - wait 5 days and warm up connection first"
        )
        confidence_score += config.weak_confidence

    if last_contacted_at is not None:
        days_since_contact = days_between(last_contacted_at, now)
        for max_days, extra_days, confidence, reason in _RECENCY_RULES:
            if days_since_contact < max_days:
                reasoning.append(reason)
                send_in_days += extra_days
                confidence_score += confidence
                break
        else:
            reasoning.append(_STALE_CONTACT_REASON)
            send_in_days += config.stale_contact_delay_days
    else:
        reasoning.append("No interaction history - establish rapport before asking")
        send_in_days += config.no_history_delay_days

    if job_deadline is not None:
        days_until_deadline = days_between(now, job_deadline)
        if days_until_deadline < config.urgent_deadline_days:
            send_in_days = min(send_in_days, 1)
            reasoning.append(f"Urgent: Only {days_until_deadline} days until deadline")
            confidence_score += config.urgent_confidence
        elif days_until_deadline < config.soon_deadline_days:
            send_in_days = min(send_in_days, 2)
            reasoning.append("Deadline within 2 weeks - send soon")
            confidence_score += config.soon_confidence
        else:
            reasoning.append("Sufficient time before deadline")
            confidence_score += config.relaxed_confidence
    elif days_between(job_created_at, now) > config.aging_job_days:
        reasoning.append("Job opportunity is aging - consider sending soon")
        send_in_days = max(1, send_in_days - 2)

    optimal_send_time = now + timedelta(days=send_in_days)

    if relationship_strength >= config.strong_relationship:
        follow_up_days = config.strong_follow_up_days
    else:
        follow_up_days = config.default_follow_up_days

    return TimingSuggestion(
        optimal_send_time=optimal_send_time,
        follow_up_time=optimal_send_time + timedelta(days=follow_up_days),
        reasoning=tuple(reasoning),
        confidence=_confidence_label(confidence_score, config),
    )


def should_follow_up(
    status: ReferralStatus | str,
    sent_at: datetime | None,
    *,
    now: datetime | None = None,
    config: TimingConfig = DEFAULT_TIMING_CONFIG,
) -> FollowUpDecision:
    """Decide whether a sent referral request is due a follow-up."""
    status_value = status.value if isinstance(status, ReferralStatus) else status
    if status_value != ReferralStatus.SENT.value:
        return FollowUpDecision(False, "Request not yet sent")

    if sent_at is None:
        return FollowUpDecision(False, "Send date unknown")

    if now is None:
        now = datetime.now(sent_at.tzinfo)
    days_since_sent = days_between(sent_at, now)

    if days_since_sent < config.min_follow_up_days:
        remaining = config.min_follow_up_days - days_since_sent
        return FollowUpDecision(
            False, f"Wait {remaining} more days before following up"
        )

    if days_since_sent <= config.max_follow_up_days:
        return FollowUpDecision(
            True, f"{days_since_sent} days since request - good time to follow up"
        )

    return FollowUpDecision(
        True, f"{days_since_sent} days since request - overdue for follow-up"
    )
