"""
Parameter extraction for matched functions.

Turns the raw user message into a best-effort parameter bag for the
function the classifier picked. Extraction never raises and never
validates; missing values are either left out (so the executor can reject
them) or filled from the user's profile, recent history or the calendar.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, Sequence, Tuple

from models import FunctionName as F, UserProfile, ChatMessage
from seasons import current_season, normalize_season
from chat_logger import get_logger
from config.settings import HISTORY_CONTEXT_WINDOW, DEFAULT_REGION, DEFAULT_AREA

logger = get_logger("greenledger_chat")


@dataclass
class _Utterance:
    raw: str
    lower: str
    user: UserProfile
    history: Sequence[ChatMessage]
    now: datetime


# ─────────────────────────────────────────────
# PATTERN TABLES
# ─────────────────────────────────────────────

# A whole number, never the tail of a decimal such as the "50" in "99.50"
_NUM = r"(?<!\d)(?<!\d\.)(\d[\d,]*(?:\.\d+)?)(?!\.?\d)"

AMOUNT_PATTERNS = [
    re.compile(_NUM + r"\s*(?:rupees?|rs\b\.?|₹|inr\b)", re.IGNORECASE),
    re.compile(r"(?:rupees?|\brs\b\.?|₹|\binr\b)\s*" + _NUM, re.IGNORECASE),
    re.compile(r"\bpay\s*" + _NUM, re.IGNORECASE),
    re.compile(_NUM + r"\s*for\b", re.IGNORECASE),
]

PURPOSE_MAP: Tuple[Tuple[str, str], ...] = (
    ("seed", "seed_purchase"),
    ("fertilizer", "fertilizer_purchase"),
    ("pesticide", "pesticide_purchase"),
    ("equipment", "equipment_purchase"),
    ("vendor", "vendor_payment"),
    ("purchase", "general_purchase"),
    ("buy", "general_purchase"),
    ("payment", "general_payment"),
)
DEFAULT_PURPOSE = "general_payment"

RECIPIENT_RE = re.compile(
    r"\bto\s+([A-Za-z][A-Za-z ]*?)(?=\s+(?:for|on|by|with)\b|[,.!?]|\s*$)"
)
_NOT_RECIPIENTS = {"pay", "send", "make", "buy", "purchase", "transfer", "the", "my"}

_QUOTE_OPEN = "\"'“‘"
_QUOTE_CLOSE = "\"'”’"
NOTIFICATION_PATTERNS = [
    re.compile(r"(?:send|notify|alert|remind).*?(?<![A-Za-z])[" + _QUOTE_OPEN + r"]([^\"“”]+?)[" + _QUOTE_CLOSE + r"](?![A-Za-z])", re.IGNORECASE),
    re.compile(r"(?:send|notify|alert|remind).*?:\s*(.+)", re.IGNORECASE),
    re.compile(r"(?:message|content|text).*?(?<![A-Za-z])[" + _QUOTE_OPEN + r"]([^\"“”]+?)[" + _QUOTE_CLOSE + r"](?![A-Za-z])", re.IGNORECASE),
    re.compile(r"(?:message|content|text).*?:\s*(.+)", re.IGNORECASE),
]
NOTIFICATION_TRIGGER_WORDS = re.compile(
    r"\b(?:send|notify|alert|remind(?:er)?|message|notification)s?\b", re.IGNORECASE
)

CAPITALISED_PLACE_RE = re.compile(r"\b(?:in|at|for)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)")
LOCATION_LABEL_RE = re.compile(r"\blocation[:\s]+([A-Za-z]+(?:\s+[A-Za-z]+)*)", re.IGNORECASE)
SEASON_RE = re.compile(r"\b(summer|monsoon|autumn|winter|rainy|dry|kharif|rabi)\b")

KNOWN_CROPS = (
    "rice", "wheat", "maize", "cotton", "sugarcane", "paddy", "millet",
    "pulses", "groundnut", "mustard", "barley", "onion", "potato", "tomato",
)
CROP_AFTER_PRICE_RE = re.compile(r"\b(?:prices?|msp|rate)\s+(?:of\s+|for\s+)?(?:the\s+|my\s+)?([a-z]+)")

ISSUE_TYPES: Tuple[Tuple[str, str], ...] = (
    ("payment", "payment"),
    ("refund", "payment"),
    ("delivery", "delivery"),
    ("pickup", "delivery"),
    ("shipment", "delivery"),
    ("quality", "quality"),
    ("damaged", "quality"),
    ("spoil", "quality"),
    ("pest", "crop_damage"),
    ("crop", "crop_damage"),
    ("app", "technical"),
    ("login", "technical"),
    ("bug", "technical"),
    ("error", "technical"),
    ("qr", "technical"),
)
ISSUE_DESCRIPTION_RE = re.compile(r"\b(?:description|details|about|is)\s*:?\s+(.+)", re.IGNORECASE)

REPORT_TYPES: Tuple[Tuple[str, str], ...] = (
    ("inventory", "inventory"),
    ("stock", "inventory"),
    ("sales", "sales"),
    ("revenue", "financial"),
    ("financ", "financial"),
    ("transaction", "transactions"),
    ("movement", "movement"),
    ("quality", "quality"),
    ("performance", "performance"),
    ("user", "users"),
)

LOG_TYPES: Tuple[Tuple[str, str], ...] = (
    ("error", "error"),
    ("warning", "warning"),
    ("security", "security"),
    ("payment", "payment"),
    ("activity", "activity"),
    ("server", "server"),
    ("application", "application"),
    ("system", "system"),
)

USER_ACTIONS: Tuple[Tuple[str, str], ...] = (
    ("deactivate", "deactivate"),
    ("suspend", "deactivate"),
    ("activate", "activate"),
    ("verify", "verify"),
    ("edit", "edit"),
    ("update", "edit"),
    ("reset", "reset_password"),
    ("export", "export"),
    ("list", "view"),
    ("view", "view"),
)

_IDENT = r"([a-z]*-?\d[a-z0-9-]*)"
_BARE_ID_RE = re.compile(r"(?:#\s*(\d{2,})|\b([a-z]{2,6}-?\d{2,}[a-z0-9]*)\b)")

# Words that end a captured place/date phrase
_PHRASE_BREAK_RE = re.compile(r"\s+(?:for|on|during|next|this|with|and|please|from|to|by)\b.*$")
_FILLER_WORDS = {
    "today", "tomorrow", "tonight", "now", "please", "soon", "later", "the", "my", "a", "an", "our",
    "this", "next", "coming", "week", "weekend", "month", "year", "season", "moment", "days",
}


# ─────────────────────────────────────────────
# SMALL HELPERS
# ─────────────────────────────────────────────

def _clean_phrase(phrase: Optional[str], break_re=_PHRASE_BREAK_RE) -> Optional[str]:
    """Trim a captured phrase at connector words and drop filler at both ends."""
    if not phrase:
        return None
    phrase = break_re.sub("", phrase.strip())
    words = [w for w in re.split(r"\s+", phrase.strip(" .,!?;:")) if w]
    while words and words[0].lower() in _FILLER_WORDS:
        words.pop(0)
    while words and words[-1].lower() in _FILLER_WORDS:
        words.pop()
    cleaned = " ".join(words).strip(" .,!?;:")
    return cleaned or None


def _first_category(lower: str, table: Sequence[Tuple[str, str]]) -> Optional[str]:
    """First canonical value whose keyword starts a word in *lower*."""
    for keyword, canonical in table:
        if re.search(r"\b" + re.escape(keyword), lower):
            return canonical
    return None


def _first_group(pattern: "re.Pattern", text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    for group in match.groups():
        if group:
            return group
    return None


def _profile_location(user: UserProfile, default: str, prefer_district: bool = False) -> str:
    if prefer_district:
        return user.district or user.state or default
    return user.state or user.district or default


def _find_identifier(text: str, labels: Sequence[str]) -> Optional[str]:
    """Identifier after one of *labels* (must contain a digit), else a bare id-looking token."""
    labelled = re.compile(
        r"\b(?:" + "|".join(labels) + r")\b\s*(?:id|number|no\.?)?\s*(?:is|:)?\s*#?\s*" + _IDENT
    )
    found = _first_group(labelled, text) or _first_group(_BARE_ID_RE, text)
    return found.upper() if found else None


def _identifier_from_context(utt: _Utterance, labels: Sequence[str]) -> Optional[str]:
    found = _find_identifier(utt.lower, labels)
    if found:
        return found
    for message in reversed(recent_history(utt.history)):
        found = _find_identifier((message.content or "").lower(), labels)
        if found:
            return found
    return None


def _parse_amount(raw: Optional[str]) -> Optional[int]:
    """Whole rupees only: "1,500" and "1500.00" parse, "99.50" does not."""
    if raw is None:
        return None
    whole, _, fraction = raw.replace(",", "").partition(".")
    if fraction.strip("0") or not whole.isdigit():
        return None
    return int(whole)


def recent_history(
    history: Optional[Sequence[ChatMessage]],
    window: int = HISTORY_CONTEXT_WINDOW,
) -> List[ChatMessage]:
    """Last *window* messages, oldest first. Never mutates *history*."""
    if not history or window <= 0:
        return []
    return list(history)[-window:]


# ─────────────────────────────────────────────
# PER-FUNCTION EXTRACTORS
# ─────────────────────────────────────────────

def _payment(utt: _Utterance) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for pattern in AMOUNT_PATTERNS:
        raw = _first_group(pattern, utt.raw)
        if raw is None:
            continue
        # paise are not supported; leave the amount out so validation rejects it
        amount = _parse_amount(raw)
        if amount is not None:
            params["amount_inr"] = amount
        break

    params["purpose"] = _first_category(utt.lower, PURPOSE_MAP) or DEFAULT_PURPOSE

    recipient = _first_group(RECIPIENT_RE, utt.raw)
    if recipient and recipient.split()[0].lower() not in _NOT_RECIPIENTS:
        params["recipient"] = recipient.strip()
    return params


def _notification(utt: _Utterance) -> Dict[str, Any]:
    for pattern in NOTIFICATION_PATTERNS:
        body = _first_group(pattern, utt.raw)
        if body and body.strip():
            return {"message": body.strip()}
    # Last resort: the whole message minus the trigger words
    stripped = NOTIFICATION_TRIGGER_WORDS.sub(" ", utt.raw)
    return {"message": re.sub(r"\s+", " ", stripped).strip(" .,!?:;")}


def _ledger(utt: _Utterance) -> Dict[str, Any]:
    if "transaction" in utt.lower:
        entry_type = "transaction"
    elif "payment" in utt.lower:
        entry_type = "payment"
    else:
        entry_type = "general"
    return {
        "entry_type": entry_type,
        "data": {
            "message": utt.raw,
            "user": utt.user.name,
            "timestamp": utt.now.isoformat(),
        },
    }


def _season(utt: _Utterance) -> str:
    match = SEASON_RE.search(utt.lower)
    return normalize_season(match.group(1)) if match else current_season(utt.now)


def _crop_advice(utt: _Utterance) -> Dict[str, Any]:
    location = _first_group(CAPITALISED_PLACE_RE, utt.raw) or _clean_phrase(
        _first_group(LOCATION_LABEL_RE, utt.raw)
    )
    return {
        "location": location or _profile_location(utt.user, DEFAULT_REGION),
        "season": _season(utt),
    }


def _qr(utt: _Utterance) -> Dict[str, Any]:
    raw_type = _clean_phrase(_first_group(re.compile(r"\b(?:for|type|kind)\s+([a-z][a-z ]*)"), utt.lower))
    return {"data_type": raw_type.replace(" ", "_") if raw_type else "farmer_identity"}


def _weather(utt: _Utterance) -> Dict[str, Any]:
    location = _clean_phrase(_first_group(re.compile(r"\b(?:for|in|at|location)\s+([a-z][a-z ]*)"), utt.lower))
    return {
        "location": location.title() if location else _profile_location(utt.user, DEFAULT_REGION),
        "season": current_season(utt.now),
    }


def _market_prices(utt: _Utterance) -> Dict[str, Any]:
    for crop in KNOWN_CROPS:
        if re.search(r"\b" + crop, utt.lower):
            return {"crop": crop.title()}
    crop = _first_group(CROP_AFTER_PRICE_RE, utt.lower)
    if crop and crop not in _FILLER_WORDS and crop not in {"in", "at", "for", "of", "is"}:
        return {"crop": crop.title()}
    return {}


def _location_near(utt: _Utterance) -> Dict[str, Any]:
    location = _clean_phrase(_first_group(re.compile(r"\b(?:near|in|at|location)\s+([a-z][a-z ]*)"), utt.lower))
    return {"location": location.title() if location else _profile_location(utt.user, DEFAULT_AREA, prefer_district=True)}


_DATE_PATTERNS = [
    re.compile(r"\bon\s+([a-z0-9][a-z0-9 ,/-]*)"),
    re.compile(r"\bdate\s*(?:is|:)?\s*([a-z0-9][a-z0-9 ,/-]*)"),
    re.compile(r"\bfor\s+([a-z0-9][a-z0-9 ,/-]*)"),
]
_DATE_BREAK_RE = re.compile(r"\s+(?:from|to|with|please)\b.*$")


def _date(utt: _Utterance) -> Optional[str]:
    for pattern in _DATE_PATTERNS:
        found = _clean_phrase(_first_group(pattern, utt.lower), _DATE_BREAK_RE)
        if found:
            return found
    return None


def _delivery(utt: _Utterance) -> Dict[str, Any]:
    date = _date(utt)
    return {"date": date} if date else {}


def _pickup(utt: _Utterance) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    date = _date(utt)
    if date:
        params["date"] = date
    location = _clean_phrase(_first_group(re.compile(r"\b(?:from|location|at)\s+([a-z][a-z ]*)"), utt.lower))
    if location:
        params["location"] = location.title()
    return params


def _issue(utt: _Utterance) -> Dict[str, Any]:
    description = _first_group(ISSUE_DESCRIPTION_RE, utt.raw)
    if re.search(r"\b(?:urgent|high|asap|emergency)\b", utt.lower):
        priority = "High"
    elif re.search(r"\b(?:low|minor)\b", utt.lower):
        priority = "Low"
    else:
        priority = "Medium"
    return {
        "issue_type": _first_category(utt.lower, ISSUE_TYPES) or "general",
        "description": (description or utt.raw).strip(),
        "priority": priority,
    }


def _order_id(labels: Sequence[str]):
    def extract(utt: _Utterance) -> Dict[str, Any]:
        order_id = _identifier_from_context(utt, labels)
        return {"order_id": order_id} if order_id else {}
    return extract


def _tracking_id(utt: _Utterance) -> Dict[str, Any]:
    tracking_id = _identifier_from_context(utt, ("tracking", "shipment", "id", "number"))
    return {"tracking_id": tracking_id} if tracking_id else {}


def _product_id(utt: _Utterance) -> Dict[str, Any]:
    product_id = _identifier_from_context(utt, ("product", "batch", "id"))
    return {"product_id": product_id} if product_id else {}


def _search(utt: _Utterance) -> Dict[str, Any]:
    query = _first_group(
        re.compile(r"\b(?:search|find|looking for|need|want)\s+(?:for\s+)?(?:to\s+buy\s+)?(?:some\s+)?(.+)"),
        utt.lower,
    )
    query = query.strip(" .,!?") if query else None
    return {"query": query} if query else {}


_PRODUCT_PATTERNS = [
    re.compile(r"\babout\s+(?:the\s+)?([a-z][a-z ]*)"),
    re.compile(r"\b(?:info|information|details|specs)\s+(?:on|of|for|about)\s+(?:the\s+)?([a-z][a-z ]*)"),
    re.compile(r"\bproduct\s+(?!info|information|details|description|specs)([a-z][a-z ]*)"),
]


def _product(utt: _Utterance) -> Dict[str, Any]:
    for pattern in _PRODUCT_PATTERNS:
        product = _clean_phrase(_first_group(pattern, utt.lower))
        if product:
            return {"product": product.title()}
    return {}


def _storage(utt: _Utterance) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    temperature = _first_group(re.compile(r"\b(?:temperature|temp)\s*(?:is|:|to|at)?\s*(-?\d+)"), utt.lower)
    humidity = _first_group(re.compile(r"\bhumidity\s*(?:is|:|to|at)?\s*(\d+)"), utt.lower)
    if temperature is not None:
        params["temperature"] = int(temperature)
    if humidity is not None:
        params["humidity"] = int(humidity)
    return params


def _categorical(key: str, table: Sequence[Tuple[str, str]], default: str):
    def extract(utt: _Utterance) -> Dict[str, Any]:
        return {key: _first_category(utt.lower, table) or default}
    return extract


EXTRACTORS = {
    F.CREATE_PAYMENT: _payment,
    F.SEND_NOTIFICATION: _notification,
    F.UPDATE_LEDGER: _ledger,
    F.FETCH_CROP_ADVICE: _crop_advice,
    F.GENERATE_QR: _qr,
    F.GET_WEATHER_FORECAST: _weather,
    F.CHECK_MARKET_PRICES: _market_prices,
    F.TRACK_SHIPMENT: _tracking_id,
    F.FIND_WAREHOUSE: _location_near,
    F.FIND_FARMER: _location_near,
    F.SCHEDULE_DELIVERY: _delivery,
    F.SCHEDULE_PICKUP: _pickup,
    F.REPORT_ISSUE: _issue,
    F.TRACK_ORDER: _order_id(("order", "id", "number")),
    F.GET_ORDER_STATUS: _order_id(("order", "id")),
    F.CANCEL_ORDER: _order_id(("order", "id")),
    F.GET_RECEIPT: _order_id(("order", "id", "receipt")),
    F.SEARCH_PRODUCTS: _search,
    F.GET_PRODUCT_INFO: _product,
    F.TRACK_PRODUCT_MOVEMENT: _product_id,
    F.UPDATE_STORAGE_CONDITIONS: _storage,
    F.GENERATE_REPORT: _categorical("report_type", REPORT_TYPES, "inventory"),
    F.VIEW_LOGS: _categorical("log_type", LOG_TYPES, "system"),
    F.MANAGE_USERS: _categorical("action", USER_ACTIONS, "view"),
}


def extract_params(
    message: str,
    function_name,
    user: Optional[UserProfile] = None,
    history: Optional[Sequence[ChatMessage]] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Best-effort parameter bag for *function_name* pulled out of *message*.

    Functions without parameters get an empty dict. Never raises.
    """
    name = F.parse(function_name)
    extractor = EXTRACTORS.get(name) if name else None
    if extractor is None:
        return {}

    message = message or ""
    utt = _Utterance(
        raw=message,
        lower=message.lower(),
        user=user or UserProfile(),
        history=history or [],
        now=now or datetime.now(timezone.utc),
    )
    try:
        return extractor(utt)
    except Exception:
        logger.exception(f"Parameter extraction failed | function={name.value}")
        return {}
