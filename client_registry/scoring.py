"""
Derived scores for stored clients: risk, trust and monthly premium.

Design notes:
- Trust reads `risk_score` and premium reads both `risk_score` and
  `trust_score`, so a record must be scored risk -> trust -> premium.
- Risk carries a small integer noise term drawn from a numpy Generator.
  With the default unseeded generator two passes over the same record can
  disagree; pass a seeded `rng` (see `make_rng`) for reproducible scores.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

import numpy as np

from . import config
from .schemas import Client

log = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = config.SEED_RISK_NOISE) -> np.random.Generator:
    return np.random.default_rng(seed)


# ---------------- Factors ---------------- #

def _age_factor(age: int) -> float:
    for upper, factor in config.AGE_BANDS:
        if age < upper:
            return factor
    return config.DEFAULT_AGE_FACTOR


def _accidents_penalty(nb_accidents_due: int) -> float:
    # harmonic decay: each extra at-fault accident costs less than the previous one
    return sum(config.ACCIDENT_PENALTY / i for i in range(1, nb_accidents_due + 1))


def _trust_discount(trust: float) -> float:
    for threshold, discount in config.TRUST_DISCOUNTS:
        if trust > threshold:
            return discount
    return 0.0


def _noise(rng: np.random.Generator) -> int:
    return int(rng.integers(0, config.RISK_NOISE_LEVELS))


# ---------------- Scores ---------------- #

def compute_risk_score(c: Client, rng: np.random.Generator) -> float:
    """Risk grows with car value (scaled up for young drivers), at-fault
    accidents and suspensions, plus a noise term in {0, 1, 2}."""
    value_factor = c.car_value / config.CAR_VALUE_UNIT
    suspension_penalty = config.SUSPENSION_PENALTY * c.nb_suspensions

    return (
        _age_factor(c.client_age) * value_factor
        + _accidents_penalty(c.nb_accidents_due)
        + suspension_penalty
        + _noise(rng)
    )


def compute_trust_score(c: Client) -> float:
    """Trust from the driving record and policy tier; needs a current `risk_score`."""
    score = (
        config.BASE_TRUST
        + config.NOT_DUE_BONUS * c.nb_accidents_not_due
        - config.DUE_PENALTY * c.nb_accidents_due
        - config.SUSPENSION_TRUST_PENALTY * c.nb_suspensions
        + config.POLICY_BONUS.get(c.policy_type, 0.0)
        - c.risk_score / config.RISK_TRUST_DIVISOR
    )
    return max(score, config.MIN_TRUST)


def compute_monthly_premium(c: Client) -> float:
    """Premium from current `risk_score` and `trust_score`, floored at the minimum."""
    risk_component = math.exp(c.risk_score / config.RISK_PREMIUM_DIVISOR) * config.RISK_PREMIUM_SCALE
    multiplier = config.POLICY_MULTIPLIER.get(c.policy_type, 1.0)

    premium = (config.BASE_PREMIUM + risk_component - _trust_discount(c.trust_score)) * multiplier
    return max(premium, config.MIN_MONTHLY_PREMIUM)


def score_client(c: Client, rng: np.random.Generator) -> Client:
    """Overwrite the derived fields of `c` in place."""
    c.risk_score = compute_risk_score(c, rng)
    c.trust_score = compute_trust_score(c)
    c.monthly_premium = compute_monthly_premium(c)
    return c


def recompute_all(store: Iterable[Client], rng: Optional[np.random.Generator] = None) -> int:
    """Rescore every client, walking the store in ascending id order.

    Returns:
        Number of clients rescored.
    """
    if rng is None:
        rng = make_rng()

    log.info("Recomputing all client scores...")
    n = 0
    for c in store:
        score_client(c, rng)
        n += 1
    log.info("All client scores updated (%d clients).", n)
    return n
