"""
Schema definitions for the client registry.

`Client` is the only entity. The three score fields are derived: the
scoring pass overwrites them and any value supplied on construction is
ignored by everything except display.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------- Client ---------------- #

@dataclass
class Client:
    client_id: int
    client_name: str
    client_age: int
    phone_number: str
    address: str
    policy_type: str          # "Basic" / "Premium" / "Gold", anything else gets no bonus
    car_value: float
    nb_accidents_due: int     # at-fault
    nb_accidents_not_due: int
    nb_suspensions: int

    risk_score: float = 0.0
    trust_score: float = 0.0
    monthly_premium: float = 0.0


# ---------------- Validation failures ---------------- #

class ValidationFailure(Enum):
    """First rule a candidate client breaks, in check order."""

    NEGATIVE_ID = "client_id cannot be negative."
    UNDERAGE = "client_age must be >= 18."
    NEGATIVE_CAR_VALUE = "car_value cannot be negative."
    NEGATIVE_ACCIDENTS_DUE = "nb_accidents_due"
    NEGATIVE_ACCIDENTS_NOT_DUE = "nb_accidents_not_due"
    NEGATIVE_SUSPENSIONS = "nb_suspensions"
    EMPTY_NAME = "client_name cannot be empty."
    EMPTY_PHONE = "phone_number cannot be empty."
    EMPTY_ADDRESS = "address cannot be empty."
    EMPTY_POLICY_TYPE = "policy_type cannot be empty."

    @property
    def message(self) -> str:
        if self in _COUNTER_FAILURES:
            return "accidents/suspensions cannot be negative."
        return self.value


_COUNTER_FAILURES = {
    ValidationFailure.NEGATIVE_ACCIDENTS_DUE,
    ValidationFailure.NEGATIVE_ACCIDENTS_NOT_DUE,
    ValidationFailure.NEGATIVE_SUSPENSIONS,
}


# ---------------- Errors ---------------- #

class RegistryError(Exception):
    """Base class for rejected registry operations."""


class ClientValidationError(RegistryError):
    def __init__(self, failure: ValidationFailure):
        super().__init__(failure.message)
        self.failure = failure


class DuplicateClientError(RegistryError):
    def __init__(self, client_id: int):
        super().__init__(f"Client with ID {client_id} already exists.")
        self.client_id = client_id
