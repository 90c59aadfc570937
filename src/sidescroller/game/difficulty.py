"""Obstacle speed as a step function of time since run start."""

from typing import List, Tuple

# (elapsed threshold in ms, speed), ascending
SPEED_TIERS: List[Tuple[float, float]] = [
    (0.0, 3.0),
    (10_000.0, 5.0),
    (20_000.0, 7.0),
]

BASE_SPEED = SPEED_TIERS[0][1]


def speed_for(elapsed_ms: float) -> float:
    """Return the obstacle speed for time elapsed since run start.

    Thresholds are inclusive: exactly 10 s already yields the second tier.
    Negative elapsed time (clock skew) is treated as zero.
    """
    elapsed_ms = max(0.0, elapsed_ms)
    speed = BASE_SPEED
    for threshold, tier_speed in SPEED_TIERS:
        if elapsed_ms >= threshold:
            speed = tier_speed
    return speed
