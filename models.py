"""
Data models for the GreenLedger assistant's intent and function-dispatch engine.
"""

from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, FrozenSet, Tuple


class Role(Enum):
    FARMER     = "farmer"
    CONSUMER   = "consumer"
    WAREHOUSE  = "warehouse"
    ADMIN      = "admin"

    @classmethod
    def parse(cls, value) -> Optional["Role"]:
        """Return the Role for *value*, or None for anything unrecognised."""
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class FunctionName(Enum):
    # Shared / ledger
    CREATE_PAYMENT             = "create_payment"
    SEND_NOTIFICATION          = "send_notification"
    UPDATE_LEDGER              = "update_ledger"
    GENERATE_QR                = "generate_qr"

    # Farmer
    FETCH_CROP_ADVICE          = "fetch_crop_advice"
    GET_WEATHER_FORECAST       = "get_weather_forecast"
    CHECK_MARKET_PRICES        = "check_market_prices"
    TRACK_SHIPMENT             = "track_shipment"
    FIND_WAREHOUSE             = "find_warehouse"
    CHECK_SUBSIDY_ELIGIBILITY  = "check_subsidy_eligibility"
    GET_FARMER_INFO            = "get_farmer_info"
    SCHEDULE_DELIVERY          = "schedule_delivery"
    REPORT_ISSUE               = "report_issue"

    # Consumer
    TRACK_ORDER                = "track_order"
    SEARCH_PRODUCTS            = "search_products"
    GET_ORDER_STATUS           = "get_order_status"
    FIND_FARMER                = "find_farmer"
    CHECK_CARBON_FOOTPRINT     = "check_carbon_footprint"
    GET_PRODUCT_INFO           = "get_product_info"
    CANCEL_ORDER               = "cancel_order"
    GET_RECEIPT                = "get_receipt"

    # Warehouse
    CHECK_INVENTORY            = "check_inventory"
    GET_WAREHOUSE_STATS        = "get_warehouse_stats"
    TRACK_PRODUCT_MOVEMENT     = "track_product_movement"
    SCHEDULE_PICKUP            = "schedule_pickup"
    UPDATE_STORAGE_CONDITIONS  = "update_storage_conditions"
    GENERATE_REPORT            = "generate_report"

    # Admin
    GET_ANALYTICS              = "get_analytics"
    GET_USER_STATS             = "get_user_stats"
    VIEW_TRANSACTIONS          = "view_transactions"
    MANAGE_USERS               = "manage_users"
    SYSTEM_HEALTH_CHECK        = "system_health_check"
    VIEW_LOGS                  = "view_logs"

    @classmethod
    def parse(cls, value) -> Optional["FunctionName"]:
        if isinstance(value, FunctionName):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            return None


class RecordType(Enum):
    TRANSACTIONS   = "transactions"
    NOTIFICATIONS  = "notifications"
    LEDGER         = "ledger"
    QRCODES        = "qrcodes"


class ExecutionState(Enum):
    """Lifecycle of one executor invocation."""
    RECEIVED    = "received"
    VALIDATING  = "validating"
    REJECTED    = "rejected"
    EXECUTING   = "executing"
    FAILED      = "failed"
    COMPLETED   = "completed"


# ─────────────────────────────────────────────
# Capabilities & conversation
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class CapabilityProfile:
    functions: FrozenSet[FunctionName]
    context_description: str
    knowledge_snippets: Tuple[str, ...] = ()


@dataclass
class ChatMessage:
    role: str                      # "user" | "assistant" | "system"
    content: str
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class IntentMatch:
    function_name: FunctionName
    confidence: float
    trigger: str = ""              # literal phrase that produced the match


@dataclass
class UserProfile:
    """Profile record owned by the auth/profile layer; read-only here."""
    id: Optional[str] = None
    name: str = ""
    role: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    village: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    uzhavar_pin: Optional[str] = None
    crops: List[str] = field(default_factory=list)
    land_size: Optional[str] = None
    verified: bool = False
    join_date: Optional[str] = None
    total_income: float = 0
    monthly_growth: float = 0
    green_points: int = 0

    # camelCase keys used by the web client
    _ALIASES = {
        "uzhavarPin": "uzhavar_pin",
        "landSize": "land_size",
        "joinDate": "join_date",
        "totalIncome": "total_income",
        "monthlyGrowth": "monthly_growth",
        "greenPoints": "green_points",
        "phoneNumber": "phone",
    }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserProfile":
        if not data:
            return cls()
        known = set(cls.__dataclass_fields__)
        kwargs = {}
        for key, value in data.items():
            key = cls._ALIASES.get(key, key)
            if key in known and value is not None:
                kwargs[key] = value
        if "id" in kwargs:
            kwargs["id"] = str(kwargs["id"])
        crops = kwargs.pop("crops", None)
        if isinstance(crops, str):
            crops = crops.split(",")
        if isinstance(crops, (list, tuple)):
            kwargs["crops"] = [str(c).strip() for c in crops if c is not None and str(c).strip()]
        return cls(**kwargs)

    @property
    def region(self) -> Optional[str]:
        """Location used for context snapshots: state first, then district."""
        return self.state or self.district


# ─────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────

@dataclass
class FunctionResult:
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> dict:
        d = {"success": self.success, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d


@dataclass
class ChatResponse:
    type: str                                  # "function_call" | "message"
    action: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict)
    content: Optional[str] = None
    confidence: float = 0.0

    @property
    def is_function_call(self) -> bool:
        return self.type == "function_call"

    def to_dict(self) -> dict:
        if self.is_function_call:
            return {
                "type": self.type,
                "action": self.action,
                "params": self.params,
                "confidence": self.confidence,
            }
        return {"type": self.type, "content": self.content, "confidence": self.confidence}


# ─────────────────────────────────────────────
# Persisted records (append-only)
# ─────────────────────────────────────────────

@dataclass
class TransactionRecord:
    id: str
    user_id: Optional[str]
    requester_id: Optional[str]
    amount: int
    purpose: str
    timestamp: str
    user: str = ""
    recipient: Optional[str] = None
    status: str = "completed"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class NotificationRecord:
    id: str
    user_id: Optional[str]
    recipient_id: Optional[str]
    message: str
    timestamp: str
    read: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LedgerEntryRecord:
    id: str                        # block hash
    user_id: Optional[str]
    requester_id: Optional[str]
    entry_type: str
    block_number: int
    timestamp: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class QRCodeRecord:
    id: str                        # the QR code payload itself
    user_id: Optional[str]
    data_type: str
    timestamp: str
    user: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
