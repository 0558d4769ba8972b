"""
Configuration for the car-insurance client registry.

Scoring weights below are the demo tariff: they are not actuarially
calibrated, they only need to reward clean driving records and penalise
young drivers with expensive cars.
"""

from typing import Optional

# ---------------- Validation ---------------- #

MIN_CLIENT_AGE: int = 18


# ---------------- Risk score ---------------- #

# (upper age bound, factor) checked in order; older drivers fall through
AGE_BANDS = [
    (25, 1.5),
    (35, 1.2),
]
DEFAULT_AGE_FACTOR: float = 1.0

CAR_VALUE_UNIT: float = 10_000.0

# k-th at-fault accident adds ACCIDENT_PENALTY / k
ACCIDENT_PENALTY: float = 10.0
SUSPENSION_PENALTY: float = 3.0

# noise term is a uniform integer in [0, RISK_NOISE_LEVELS)
RISK_NOISE_LEVELS: int = 3


# ---------------- Trust score ---------------- #

BASE_TRUST: float = 60.0
NOT_DUE_BONUS: float = 5.0
DUE_PENALTY: float = 15.0
SUSPENSION_TRUST_PENALTY: float = 20.0
RISK_TRUST_DIVISOR: float = 2.0
MIN_TRUST: float = 0.0

POLICY_BONUS = {
    "Gold": 12.0,
    "Premium": 7.0,
}


# ---------------- Monthly premium ---------------- #

BASE_PREMIUM: float = 40.0
RISK_PREMIUM_SCALE: float = 20.0
RISK_PREMIUM_DIVISOR: float = 50.0

# (trust strictly above, discount) checked in order
TRUST_DISCOUNTS = [
    (70.0, 10.0),
    (50.0, 5.0),
]

POLICY_MULTIPLIER = {
    "Gold": 1.2,
    "Premium": 1.1,
}

MIN_MONTHLY_PREMIUM: float = 35.0


# ---------------- Random seeds ---------------- #
# None draws fresh OS entropy, so two recomputes of the same record can
# differ by up to RISK_NOISE_LEVELS - 1. Pin it for reproducible runs.

SEED_RISK_NOISE: Optional[int] = None


# ---------------- Logging ---------------- #

LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"
