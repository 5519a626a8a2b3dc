"""
Tests for the deterministic intent classifier.

Covers the confidence threshold, role filtering, the max-weight scoring
policy and tie-breaking by registration order.
"""

import pytest

from models import FunctionName as F
from classifier import classify, score_all
from capability_registry import capabilities_for
from intent_patterns import TRIGGER_TABLE

FARMER = capabilities_for("farmer").functions
CONSUMER = capabilities_for("consumer").functions
ALL_FUNCTIONS = set(F)


class TestClassifyBasics:

    def test_payment_with_amount(self):
        match = classify("pay 500 rupees for seeds", FARMER)
        assert match.function_name == F.CREATE_PAYMENT
        assert match.confidence == pytest.approx(0.9)
        assert match.trigger == "pay"

    def test_weather_question(self):
        match = classify("what's the weather like", FARMER)
        assert match.function_name == F.GET_WEATHER_FORECAST
        assert match.confidence == pytest.approx(0.9)

    def test_case_insensitive(self):
        match = classify("PAY 500 RUPEES", FARMER)
        assert match.function_name == F.CREATE_PAYMENT

    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_empty_message(self, message):
        assert classify(message, FARMER) is None

    def test_small_talk_has_no_match(self):
        assert classify("hello, how are you", CONSUMER) is None

    def test_no_allowed_functions(self):
        assert classify("pay 500 rupees", frozenset()) is None
        assert classify("pay 500 rupees", capabilities_for("guest").functions) is None

    def test_role_filtering(self):
        # crop advice is a farmer function; consumers never get it
        assert classify("crop advice please", FARMER).function_name == F.FETCH_CROP_ADVICE
        assert classify("crop advice please", CONSUMER) is None

    def test_determinism(self):
        results = {classify("track my order status", CONSUMER) for _ in range(10)}
        assert len(results) == 1


class TestThreshold:

    def test_below_threshold_is_rejected(self):
        table = ((F.CREATE_PAYMENT, (("hello", 0.49),)),)
        assert classify("hello there", ALL_FUNCTIONS, table=table) is None

    def test_threshold_is_inclusive(self):
        table = ((F.CREATE_PAYMENT, (("hello", 0.5),)),)
        match = classify("hello there", ALL_FUNCTIONS, table=table)
        assert match.function_name == F.CREATE_PAYMENT
        assert match.confidence == 0.5

    def test_custom_threshold(self):
        table = ((F.CREATE_PAYMENT, (("hello", 0.7),)),)
        assert classify("hello", ALL_FUNCTIONS, table=table, min_confidence=0.8) is None


class TestScoringPolicy:

    def test_phrases_do_not_accumulate(self):
        table = (
            (F.CREATE_PAYMENT, (("alpha", 0.6), ("beta", 0.6))),
            (F.SEND_NOTIFICATION, (("alpha beta", 0.7),)),
        )
        match = classify("alpha beta", ALL_FUNCTIONS, table=table)
        assert match.function_name == F.SEND_NOTIFICATION
        assert match.confidence == 0.7

    def test_best_function_wins_across_functions(self):
        # "weather" is 0.7 for crop advice and 0.9 for the forecast
        match = classify("weather forecast", FARMER)
        assert match.function_name == F.GET_WEATHER_FORECAST
        assert match.confidence == pytest.approx(0.95)

    def test_tie_goes_to_first_registered(self):
        # both register "order status" at 0.95; track_order comes first
        match = classify("order status", CONSUMER)
        assert match.function_name == F.TRACK_ORDER
        assert match.confidence == pytest.approx(0.95)

    def test_tie_break_follows_table_order(self):
        a = (F.CREATE_PAYMENT, (("same", 0.8),))
        b = (F.SEND_NOTIFICATION, (("same", 0.8),))
        assert classify("same", ALL_FUNCTIONS, table=(a, b)).function_name == F.CREATE_PAYMENT
        assert classify("same", ALL_FUNCTIONS, table=(b, a)).function_name == F.SEND_NOTIFICATION


class TestScoreAll:

    def test_reports_best_weight_per_function(self):
        scores = score_all("weather forecast", FARMER)
        assert scores["get_weather_forecast"] == pytest.approx(0.95)
        assert scores["fetch_crop_advice"] == pytest.approx(0.7)

    def test_respects_allowed_functions(self):
        scores = score_all("order status", FARMER)
        assert "track_order" not in scores


class TestTriggerTable:

    def test_every_function_has_triggers(self):
        registered = [name for name, _ in TRIGGER_TABLE]
        assert set(registered) == set(F)
        assert len(registered) == len(set(registered))

    def test_weights_are_probabilities(self):
        for _, triggers in TRIGGER_TABLE:
            for phrase, weight in triggers:
                assert phrase == phrase.lower()
                assert 0.0 <= weight <= 1.0
