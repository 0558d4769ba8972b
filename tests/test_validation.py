import pytest

from client_registry.schemas import ClientValidationError, ValidationFailure
from client_registry.validation import check_client, validate

from conftest import make_client


def test_valid_client():
    result = validate(make_client())
    assert result
    assert result.ok
    assert result.failure is None
    assert result.reason is None


@pytest.mark.parametrize(
    "overrides, failure",
    [
        ({"client_id": -1}, ValidationFailure.NEGATIVE_ID),
        ({"client_age": 17}, ValidationFailure.UNDERAGE),
        ({"car_value": -0.01}, ValidationFailure.NEGATIVE_CAR_VALUE),
        ({"nb_accidents_due": -1}, ValidationFailure.NEGATIVE_ACCIDENTS_DUE),
        ({"nb_accidents_not_due": -1}, ValidationFailure.NEGATIVE_ACCIDENTS_NOT_DUE),
        ({"nb_suspensions": -1}, ValidationFailure.NEGATIVE_SUSPENSIONS),
        ({"client_name": ""}, ValidationFailure.EMPTY_NAME),
        ({"phone_number": ""}, ValidationFailure.EMPTY_PHONE),
        ({"address": ""}, ValidationFailure.EMPTY_ADDRESS),
        ({"policy_type": ""}, ValidationFailure.EMPTY_POLICY_TYPE),
    ],
)
def test_each_rule(overrides, failure):
    result = validate(make_client(**overrides))
    assert not result
    assert result.failure is failure


def test_underage_reason():
    assert validate(make_client(client_age=17)).reason == "client_age must be >= 18."
    assert validate(make_client(client_age=18))


def test_first_failure_wins():
    c = make_client(client_id=-5, client_age=10, client_name="", policy_type="")
    assert validate(c).failure is ValidationFailure.NEGATIVE_ID

    c = make_client(client_age=10, nb_suspensions=-1)
    assert validate(c).failure is ValidationFailure.UNDERAGE


def test_counter_failures_share_message():
    messages = {
        validate(make_client(**{name: -1})).reason
        for name in ["nb_accidents_due", "nb_accidents_not_due", "nb_suspensions"]
    }
    assert messages == {"accidents/suspensions cannot be negative."}


def test_unknown_policy_type_is_accepted():
    assert validate(make_client(policy_type="Platinum"))


def test_check_client_raises():
    check_client(make_client())
    with pytest.raises(ClientValidationError) as exc:
        check_client(make_client(phone_number=""))
    assert exc.value.failure is ValidationFailure.EMPTY_PHONE
    assert str(exc.value) == "phone_number cannot be empty."


def test_nan_car_value_is_rejected():
    result = validate(make_client(car_value=float("nan")))
    assert result.failure is ValidationFailure.NEGATIVE_CAR_VALUE
