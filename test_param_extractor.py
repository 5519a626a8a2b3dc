"""
Tests for per-function parameter extraction.

Extraction is best-effort and never raises; missing values are left out
or filled from the profile, history or calendar.
"""

import pytest

from models import FunctionName as F, UserProfile, ChatMessage
from param_extractor import extract_params, recent_history
from conftest import FIXED_NOW


def extract(message, function_name, user=None, history=None):
    return extract_params(message, function_name, user, history, now=FIXED_NOW)


class TestPaymentExtraction:

    def test_amount_and_purpose(self):
        params = extract("pay 500 rupees for seeds", F.CREATE_PAYMENT)
        assert params == {"amount_inr": 500, "purpose": "seed_purchase"}

    @pytest.mark.parametrize("message, amount", [
        ("pay rs 1,500 for fertilizer", 1500),
        ("₹250 for pesticide", 250),
        ("transfer 2,000 INR", 2000),
        ("pay 750", 750),
        ("buy 300 for equipment", 300),
    ])
    def test_amount_formats(self, message, amount):
        assert extract(message, F.CREATE_PAYMENT)["amount_inr"] == amount

    @pytest.mark.parametrize("message, amount", [
        ("pay 1,500.00 rupees for seeds", 1500),
        ("pay rs.200 for seeds", 200),
        ("pay 500.", 500),
    ])
    def test_whole_rupee_decimals(self, message, amount):
        assert extract(message, F.CREATE_PAYMENT)["amount_inr"] == amount

    @pytest.mark.parametrize("message", [
        "pay 99.50 rupees for seeds",
        "pay ₹12.75 for pesticide",
        "pay 0.5 for seeds",
    ])
    def test_fractional_amount_is_left_out(self, message):
        assert "amount_inr" not in extract(message, F.CREATE_PAYMENT)

    def test_no_amount(self):
        params = extract("pay", F.CREATE_PAYMENT)
        assert "amount_inr" not in params
        assert params["purpose"] == "general_payment"

    @pytest.mark.parametrize("message, purpose", [
        ("pay 100 rupees for fertilizer", "fertilizer_purchase"),
        ("pay 100 rupees to the vendor", "vendor_payment"),
        ("purchase worth 100 rupees", "general_purchase"),
        ("make payment 100 rupees", "general_payment"),
    ])
    def test_purpose_keywords(self, message, purpose):
        assert extract(message, F.CREATE_PAYMENT)["purpose"] == purpose

    def test_recipient(self):
        params = extract("send money to Ravi Kumar for seeds", F.CREATE_PAYMENT)
        assert params["recipient"] == "Ravi Kumar"

    def test_infinitive_is_not_a_recipient(self):
        params = extract("I need to pay for seeds", F.CREATE_PAYMENT)
        assert "recipient" not in params


class TestNotificationExtraction:

    def test_quoted_message(self):
        params = extract('send message "Harvest pickup at 6am"', F.SEND_NOTIFICATION)
        assert params["message"] == "Harvest pickup at 6am"

    def test_colon_message(self):
        params = extract("send message: harvest pickup moved to Friday", F.SEND_NOTIFICATION)
        assert params["message"] == "harvest pickup moved to Friday"

    def test_fallback_strips_trigger_words(self):
        params = extract("remind me to irrigate the field", F.SEND_NOTIFICATION)
        assert "remind" not in params["message"]
        assert params["message"].endswith("irrigate the field")

    def test_trigger_only_gives_empty_message(self):
        assert extract("notify", F.SEND_NOTIFICATION)["message"] == ""


class TestContextDefaults:

    def test_ledger_entry(self, farmer_user):
        params = extract("record transaction in ledger", F.UPDATE_LEDGER, farmer_user)
        assert params["entry_type"] == "transaction"
        assert params["data"] == {
            "message": "record transaction in ledger",
            "user": "Ravi Kumar",
            "timestamp": FIXED_NOW.isoformat(),
        }

    def test_crop_advice_place_and_season(self, farmer_user):
        params = extract("crop advice for Coimbatore in monsoon", F.FETCH_CROP_ADVICE, farmer_user)
        assert params == {"location": "Coimbatore", "season": "monsoon"}

    def test_crop_advice_season_alias(self, farmer_user):
        params = extract("what to plant this rabi season", F.FETCH_CROP_ADVICE, farmer_user)
        assert params == {"location": "Tamil Nadu", "season": "winter"}

    def test_crop_advice_location_label(self):
        params = extract("crop advice, location: Salem", F.FETCH_CROP_ADVICE)
        assert params["location"] == "Salem"

    def test_crop_advice_without_profile(self):
        params = extract("crop advice", F.FETCH_CROP_ADVICE, UserProfile())
        # FIXED_NOW is mid-July
        assert params == {"location": "your region", "season": "monsoon"}

    def test_weather_location_from_message(self, farmer_user):
        params = extract("what's the weather like in chennai", F.GET_WEATHER_FORECAST, farmer_user)
        assert params == {"location": "Chennai", "season": "monsoon"}

    def test_weather_filler_falls_back_to_profile(self, farmer_user):
        params = extract("weather forecast for tomorrow", F.GET_WEATHER_FORECAST, farmer_user)
        assert params["location"] == "Tamil Nadu"

    @pytest.mark.parametrize("message", [
        "weather forecast for next week",
        "weather forecast for this season",
        "weather for the coming days",
    ])
    def test_weather_time_phrases_are_not_places(self, farmer_user, message):
        assert extract(message, F.GET_WEATHER_FORECAST, farmer_user)["location"] == "Tamil Nadu"

    def test_weather_place_before_time_phrase(self, farmer_user):
        params = extract("weather in salem next week", F.GET_WEATHER_FORECAST, farmer_user)
        assert params["location"] == "Salem"

    def test_warehouse_prefers_district(self, farmer_user):
        assert extract("find warehouse", F.FIND_WAREHOUSE, farmer_user) == {"location": "Madurai"}
        assert extract("find warehouse near salem", F.FIND_WAREHOUSE, farmer_user) == {"location": "Salem"}

    def test_qr_data_type(self):
        assert extract("generate qr code for produce batch", F.GENERATE_QR) == {"data_type": "produce_batch"}
        assert extract("generate qr", F.GENERATE_QR) == {"data_type": "farmer_identity"}


class TestMarketPrices:

    def test_known_crop(self):
        assert extract("what is the market price of wheat", F.CHECK_MARKET_PRICES) == {"crop": "Wheat"}

    def test_price_is_not_rice(self):
        assert extract("current price of cotton", F.CHECK_MARKET_PRICES) == {"crop": "Cotton"}

    def test_unlisted_crop_after_price(self):
        assert extract("msp for ragi", F.CHECK_MARKET_PRICES) == {"crop": "Ragi"}

    def test_no_crop(self):
        assert extract("market price", F.CHECK_MARKET_PRICES) == {}


class TestIdentifiers:

    def test_labelled_order_id(self):
        assert extract("track order ORD12345", F.TRACK_ORDER) == {"order_id": "ORD12345"}

    def test_hash_order_number(self):
        assert extract("where is my order #4521", F.GET_ORDER_STATUS) == {"order_id": "4521"}

    def test_identifier_needs_a_digit(self):
        assert extract("track order status", F.TRACK_ORDER) == {}

    def test_falls_back_to_recent_history(self):
        history = [
            ChatMessage("user", "my order ORD777 is late"),
            ChatMessage("assistant", "Sorry to hear that."),
        ]
        assert extract("cancel it", F.CANCEL_ORDER, history=history) == {"order_id": "ORD777"}

    def test_history_window_is_bounded(self):
        history = [
            ChatMessage("user", "order ORD777"),
            ChatMessage("assistant", "ok"),
            ChatMessage("user", "thanks"),
            ChatMessage("assistant", "anything else?"),
        ]
        assert extract("cancel it", F.CANCEL_ORDER, history=history) == {}

    def test_tracking_and_product_ids(self):
        assert extract("track shipment TRK9001", F.TRACK_SHIPMENT) == {"tracking_id": "TRK9001"}
        assert extract("product movement for batch B-204", F.TRACK_PRODUCT_MOVEMENT) == {"product_id": "B-204"}

    def test_history_is_not_mutated(self):
        history = [ChatMessage("user", "order ORD1 please")]
        extract("cancel it", F.CANCEL_ORDER, history=history)
        assert len(history) == 1


class TestOperationalParams:

    def test_storage_conditions(self):
        params = extract("set temperature to 18 and humidity 55", F.UPDATE_STORAGE_CONDITIONS)
        assert params == {"temperature": 18, "humidity": 55}

    def test_negative_temperature(self):
        assert extract("temperature -5", F.UPDATE_STORAGE_CONDITIONS) == {"temperature": -5}

    def test_pickup_date_and_location(self):
        params = extract("schedule pickup from melur farm on friday", F.SCHEDULE_PICKUP)
        assert params == {"date": "friday", "location": "Melur Farm"}

    def test_delivery_date(self):
        assert extract("schedule delivery on 25/12", F.SCHEDULE_DELIVERY) == {"date": "25/12"}

    def test_search_query(self):
        assert extract("search for organic tomatoes", F.SEARCH_PRODUCTS) == {"query": "organic tomatoes"}

    def test_product_name(self):
        assert extract("tell me about organic rice", F.GET_PRODUCT_INFO) == {"product": "Organic Rice"}

    def test_issue_report(self):
        params = extract("urgent problem with payment refund", F.REPORT_ISSUE)
        assert params["issue_type"] == "payment"
        assert params["priority"] == "High"
        assert params["description"] == "urgent problem with payment refund"

    def test_issue_description_after_is(self):
        params = extract("the problem is the pump broke", F.REPORT_ISSUE)
        assert params["description"] == "the pump broke"
        assert params["priority"] == "Medium"

    @pytest.mark.parametrize("function_name, message, expected", [
        (F.GENERATE_REPORT, "generate sales report", {"report_type": "sales"}),
        (F.GENERATE_REPORT, "generate report", {"report_type": "inventory"}),
        (F.VIEW_LOGS, "show error logs", {"log_type": "error"}),
        (F.VIEW_LOGS, "view logs", {"log_type": "system"}),
        (F.MANAGE_USERS, "deactivate user 12", {"action": "deactivate"}),
        (F.MANAGE_USERS, "activate user 12", {"action": "activate"}),
        (F.MANAGE_USERS, "manage users", {"action": "view"}),
    ])
    def test_categorical_params(self, function_name, message, expected):
        assert extract(message, function_name) == expected


class TestNeverRaises:

    def test_function_without_params(self):
        assert extract("check stock", F.CHECK_INVENTORY) == {}

    def test_unknown_function(self):
        assert extract("pay 500", "launch_rocket") == {}

    def test_string_function_name(self):
        assert extract("pay 500 rupees", "create_payment")["amount_inr"] == 500

    def test_none_message(self):
        assert extract_params(None, F.CREATE_PAYMENT) == {"purpose": "general_payment"}

    def test_recent_history_window(self):
        history = [ChatMessage("user", str(i)) for i in range(5)]
        assert [m.content for m in recent_history(history, 3)] == ["2", "3", "4"]
        assert recent_history(None) == []
