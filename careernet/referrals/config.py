"""Configuration for referral timing heuristics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingConfig:
    """Day offsets and confidence weights for referral timing."""

    strong_relationship: int = 4
    moderate_relationship: int = 3

    strong_send_days: int = 1
    moderate_send_days: int = 2
    weak_send_days: int = 5

    strong_confidence: int = 40
    moderate_confidence: int = 30
    weak_confidence: int = 20

    no_history_delay_days: int = 5
    stale_contact_delay_days: int = 7

    urgent_deadline_days: int = 7
    soon_deadline_days: int = 14
    aging_job_days: int = 14

    urgent_confidence: int = 20
    soon_confidence: int = 15
    relaxed_confidence: int = 10

    strong_follow_up_days: int = 5
    default_follow_up_days: int = 7

    high_confidence: int = 70
    medium_confidence: int = 50

    min_follow_up_days: int = 5
    max_follow_up_days: int = 14


DEFAULT_TIMING_CONFIG = TimingConfig()
