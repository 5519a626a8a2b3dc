"""
Typed parameter shapes for every dispatchable function.

The extractor produces loose dicts; the executor turns them into one of
these dataclasses with build_params() and asks validate() before any side
effect happens.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Dict, Any, Type

from models import FunctionName as F


def _to_int(value) -> Optional[int]:
    """Coerce ints, integral floats and numeric strings ("1,500") to int."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if text.lstrip("-").isdigit():
            return int(text)
    return None


@dataclass
class FunctionParams:
    requester_id: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> Optional[str]:
        """Return a user-facing error message, or None when usable."""
        return None


@dataclass
class CreatePaymentParams(FunctionParams):
    amount_inr: Optional[int] = None
    purpose: str = "general_payment"
    recipient: Optional[str] = None

    def validate(self) -> Optional[str]:
        if self.amount_inr is None or self.amount_inr <= 0:
            return "Please specify a valid amount for the payment."
        return None


@dataclass
class SendNotificationParams(FunctionParams):
    message: str = ""
    recipient_id: Optional[str] = None

    def validate(self) -> Optional[str]:
        if not (self.message or "").strip():
            return "Please provide a message to send."
        return None


@dataclass
class UpdateLedgerParams(FunctionParams):
    entry_type: str = "transaction"
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class FetchCropAdviceParams(FunctionParams):
    location: Optional[str] = None
    season: Optional[str] = None


@dataclass
class GenerateQrParams(FunctionParams):
    data_type: str = "farmer_identity"


@dataclass
class WeatherParams(FunctionParams):
    location: Optional[str] = None
    season: Optional[str] = None


@dataclass
class MarketPriceParams(FunctionParams):
    crop: str = "Rice"


@dataclass
class TrackShipmentParams(FunctionParams):
    tracking_id: Optional[str] = None


@dataclass
class LocationParams(FunctionParams):
    location: Optional[str] = None


@dataclass
class ScheduleDeliveryParams(FunctionParams):
    date: Optional[str] = None


@dataclass
class ReportIssueParams(FunctionParams):
    issue_type: str = "general"
    description: Optional[str] = None
    priority: str = "Medium"


@dataclass
class OrderParams(FunctionParams):
    order_id: Optional[str] = None


@dataclass
class SearchProductsParams(FunctionParams):
    query: Optional[str] = None


@dataclass
class ProductInfoParams(FunctionParams):
    product: Optional[str] = None


@dataclass
class ProductMovementParams(FunctionParams):
    product_id: Optional[str] = None


@dataclass
class SchedulePickupParams(FunctionParams):
    date: Optional[str] = None
    location: Optional[str] = None


@dataclass
class StorageConditionsParams(FunctionParams):
    temperature: Optional[int] = None
    humidity: Optional[int] = None

    def validate(self) -> Optional[str]:
        if self.temperature is not None and not -30 <= self.temperature <= 60:
            return "Storage temperature must be between -30°C and 60°C."
        if self.humidity is not None and not 0 <= self.humidity <= 100:
            return "Humidity must be between 0% and 100%."
        return None


@dataclass
class ReportParams(FunctionParams):
    report_type: str = "inventory"


@dataclass
class ManageUsersParams(FunctionParams):
    action: str = "view"


@dataclass
class ViewLogsParams(FunctionParams):
    log_type: str = "system"


PARAM_TYPES: Dict[F, Type[FunctionParams]] = {
    F.CREATE_PAYMENT: CreatePaymentParams,
    F.SEND_NOTIFICATION: SendNotificationParams,
    F.UPDATE_LEDGER: UpdateLedgerParams,
    F.FETCH_CROP_ADVICE: FetchCropAdviceParams,
    F.GENERATE_QR: GenerateQrParams,
    F.GET_WEATHER_FORECAST: WeatherParams,
    F.CHECK_MARKET_PRICES: MarketPriceParams,
    F.TRACK_SHIPMENT: TrackShipmentParams,
    F.FIND_WAREHOUSE: LocationParams,
    F.FIND_FARMER: LocationParams,
    F.SCHEDULE_DELIVERY: ScheduleDeliveryParams,
    F.REPORT_ISSUE: ReportIssueParams,
    F.TRACK_ORDER: OrderParams,
    F.GET_ORDER_STATUS: OrderParams,
    F.CANCEL_ORDER: OrderParams,
    F.GET_RECEIPT: OrderParams,
    F.SEARCH_PRODUCTS: SearchProductsParams,
    F.GET_PRODUCT_INFO: ProductInfoParams,
    F.TRACK_PRODUCT_MOVEMENT: ProductMovementParams,
    F.SCHEDULE_PICKUP: SchedulePickupParams,
    F.UPDATE_STORAGE_CONDITIONS: StorageConditionsParams,
    F.GENERATE_REPORT: ReportParams,
    F.MANAGE_USERS: ManageUsersParams,
    F.VIEW_LOGS: ViewLogsParams,
}

_INT_FIELDS = {"amount_inr", "temperature", "humidity"}


def build_params(function_name: F, bag: Optional[Dict[str, Any]]) -> FunctionParams:
    """
    Build the typed params for *function_name* from a loose dict.

    Unknown keys are dropped; integer fields accept numeric strings and
    anything else non-numeric becomes None so validate() can reject it.
    Functions without a dedicated shape get the plain FunctionParams.
    """
    cls = PARAM_TYPES.get(function_name, FunctionParams)
    names = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in (bag or {}).items():
        if key not in names:
            continue
        if key in _INT_FIELDS:
            value = _to_int(value)
        elif key == "context" and not isinstance(value, dict):
            continue
        if value is None:
            continue
        kwargs[key] = value
    return cls(**kwargs)
