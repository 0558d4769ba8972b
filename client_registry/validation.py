"""
Validation gate applied before a client enters the store.

Rules are checked in a fixed order and only the first failure is
reported, so a record with several problems always yields the same reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import config
from .schemas import Client, ClientValidationError, ValidationFailure


@dataclass(frozen=True)
class ValidationResult:
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> Optional[str]:
        return self.failure.message if self.failure else None

    def __bool__(self) -> bool:
        return self.ok


def _first_failure(c: Client) -> Optional[ValidationFailure]:
    if c.client_id < 0:
        return ValidationFailure.NEGATIVE_ID
    if c.client_age < config.MIN_CLIENT_AGE:
        return ValidationFailure.UNDERAGE
    if not c.car_value >= 0:  # also rejects NaN
        return ValidationFailure.NEGATIVE_CAR_VALUE

    counters = [
        (c.nb_accidents_due, ValidationFailure.NEGATIVE_ACCIDENTS_DUE),
        (c.nb_accidents_not_due, ValidationFailure.NEGATIVE_ACCIDENTS_NOT_DUE),
        (c.nb_suspensions, ValidationFailure.NEGATIVE_SUSPENSIONS),
    ]
    for value, failure in counters:
        if value < 0:
            return failure

    required = [
        (c.client_name, ValidationFailure.EMPTY_NAME),
        (c.phone_number, ValidationFailure.EMPTY_PHONE),
        (c.address, ValidationFailure.EMPTY_ADDRESS),
        (c.policy_type, ValidationFailure.EMPTY_POLICY_TYPE),
    ]
    for value, failure in required:
        if not value:
            return failure

    return None


def validate(c: Client) -> ValidationResult:
    """Check base fields; the result is truthy when the client is insertable."""
    return ValidationResult(_first_failure(c))


def check_client(c: Client) -> None:
    """Raise ClientValidationError for the first rule `c` breaks."""
    failure = _first_failure(c)
    if failure is not None:
        raise ClientValidationError(failure)
