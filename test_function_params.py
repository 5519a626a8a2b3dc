"""
Tests for typed parameter building and validation.
"""

import pytest

from models import FunctionName as F
from function_params import (
    build_params, PARAM_TYPES, FunctionParams,
    CreatePaymentParams, SendNotificationParams, StorageConditionsParams,
)


class TestBuildParams:

    def test_payment_shape(self):
        params = build_params(F.CREATE_PAYMENT, {"amount_inr": 500, "purpose": "seed_purchase"})
        assert isinstance(params, CreatePaymentParams)
        assert params.amount_inr == 500
        assert params.purpose == "seed_purchase"
        assert params.recipient is None

    def test_unknown_keys_are_dropped(self):
        params = build_params(F.CREATE_PAYMENT, {"amount_inr": 5, "bogus": 1})
        assert not hasattr(params, "bogus")

    @pytest.mark.parametrize("raw, expected", [
        ("1,500", 1500),
        (" 42 ", 42),
        (750.0, 750),
        ("abc", None),
        (12.5, None),
        (True, None),
    ])
    def test_amount_coercion(self, raw, expected):
        assert build_params(F.CREATE_PAYMENT, {"amount_inr": raw}).amount_inr == expected

    def test_defaults_survive_none_values(self):
        params = build_params(F.CREATE_PAYMENT, {"amount_inr": 1, "purpose": None})
        assert params.purpose == "general_payment"

    def test_context_must_be_a_dict(self):
        params = build_params(F.GENERATE_QR, {"context": "oops"})
        assert params.context == {}
        params = build_params(F.GENERATE_QR, {"context": {"name": "Ravi"}})
        assert params.context == {"name": "Ravi"}

    def test_function_without_shape_gets_base_params(self):
        params = build_params(F.CHECK_INVENTORY, {"requester_id": "W1", "anything": 1})
        assert type(params) is FunctionParams
        assert params.requester_id == "W1"

    def test_none_bag(self):
        assert build_params(F.TRACK_ORDER, None).order_id is None

    def test_registered_shapes_are_params(self):
        for cls in PARAM_TYPES.values():
            assert issubclass(cls, FunctionParams)


class TestValidation:

    @pytest.mark.parametrize("amount", [None, 0, -10])
    def test_payment_needs_positive_amount(self, amount):
        assert CreatePaymentParams(amount_inr=amount).validate() == (
            "Please specify a valid amount for the payment."
        )

    def test_valid_payment(self):
        assert CreatePaymentParams(amount_inr=1).validate() is None

    @pytest.mark.parametrize("message", ["", "   "])
    def test_notification_needs_text(self, message):
        assert SendNotificationParams(message=message).validate() == "Please provide a message to send."

    def test_valid_notification(self):
        assert SendNotificationParams(message="Harvest at 6").validate() is None

    @pytest.mark.parametrize("temperature, humidity, ok", [
        (None, None, True),
        (18, 55, True),
        (-30, 0, True),
        (60, 100, True),
        (-31, None, False),
        (61, None, False),
        (None, 101, False),
        (None, -1, False),
    ])
    def test_storage_ranges(self, temperature, humidity, ok):
        problem = StorageConditionsParams(temperature=temperature, humidity=humidity).validate()
        assert (problem is None) == ok

    def test_base_params_always_valid(self):
        assert FunctionParams().validate() is None
