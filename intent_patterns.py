"""
Weighted trigger phrases per function.

Each entry is (function, ((phrase, weight), ...)). Order matters: the
classifier walks this table top to bottom and the first function to reach
the best weight wins ties. Bump TRIGGER_TABLE_VERSION whenever a phrase or
weight changes so logged classifications can be traced to a table.
"""

from typing import Tuple

from models import FunctionName as F

TRIGGER_TABLE_VERSION = "2024.1"

TriggerTable = Tuple[Tuple[F, Tuple[Tuple[str, float], ...]], ...]

TRIGGER_TABLE: TriggerTable = (
    (F.CREATE_PAYMENT, (
        ("pay", 0.9), ("payment", 0.9), ("send money", 0.95), ("transfer", 0.85),
        ("purchase", 0.8), ("buy", 0.8), ("make payment", 0.9),
        ("process payment", 0.9), ("rupees", 0.7), ("rs", 0.7), ("₹", 0.7),
        ("inr", 0.7), ("pay for", 0.85), ("transaction", 0.75),
    )),
    (F.SEND_NOTIFICATION, (
        ("notify", 0.9), ("send message", 0.95), ("alert", 0.9), ("remind", 0.85),
        ("notification", 0.9), ("send alert", 0.9), ("notify me", 0.85),
        ("send notification", 0.9), ("reminder", 0.85),
    )),
    (F.UPDATE_LEDGER, (
        ("update ledger", 0.95), ("record", 0.7), ("log", 0.7),
        ("save to ledger", 0.9), ("ledger entry", 0.9), ("blockchain", 0.85),
        ("record transaction", 0.9), ("save transaction", 0.9),
    )),
    (F.FETCH_CROP_ADVICE, (
        ("crop advice", 0.95), ("what to plant", 0.9), ("farming advice", 0.9),
        ("weather", 0.7), ("soil", 0.7), ("crop recommendation", 0.9),
        ("planting advice", 0.9), ("which crop", 0.85), ("harvest", 0.8),
        ("irrigation", 0.75), ("fertilizer advice", 0.8), ("pest control", 0.75),
    )),
    (F.GENERATE_QR, (
        ("generate qr", 0.95), ("create qr", 0.95), ("qr code", 0.9),
        ("digital identity", 0.85), ("make qr", 0.9), ("new qr", 0.85),
        ("qr for", 0.9), ("identity qr", 0.85),
    )),
    (F.GET_WEATHER_FORECAST, (
        ("weather", 0.9), ("forecast", 0.95), ("rain", 0.85), ("temperature", 0.85),
        ("climate", 0.8), ("weather forecast", 0.95), ("weather update", 0.9),
        ("rain forecast", 0.9), ("temperature forecast", 0.85),
    )),
    (F.CHECK_MARKET_PRICES, (
        ("market price", 0.95), ("price", 0.8), ("msp", 0.9), ("crop price", 0.9),
        ("selling price", 0.85), ("market rate", 0.9), ("current price", 0.85),
        ("price of", 0.8), ("how much for", 0.8),
    )),
    (F.TRACK_SHIPMENT, (
        ("track shipment", 0.95), ("track delivery", 0.95), ("where is my", 0.85),
        ("shipment status", 0.9), ("delivery status", 0.9), ("track my", 0.85),
        ("shipment tracking", 0.95), ("delivery tracking", 0.95),
    )),
    (F.FIND_WAREHOUSE, (
        ("find warehouse", 0.95), ("nearby warehouse", 0.9), ("warehouse near", 0.9),
        ("storage", 0.7), ("warehouse location", 0.85), ("nearest warehouse", 0.9),
        ("warehouse address", 0.85),
    )),
    (F.CHECK_SUBSIDY_ELIGIBILITY, (
        ("subsidy", 0.9), ("eligibility", 0.85), ("government scheme", 0.95),
        ("pm kisan", 0.9), ("subsidy check", 0.9), ("scheme eligibility", 0.95),
        ("government benefit", 0.9), ("subsidy status", 0.9),
    )),
    (F.GET_FARMER_INFO, (
        ("my profile", 0.9), ("farmer info", 0.95), ("my information", 0.85),
        ("profile", 0.8), ("farmer details", 0.9), ("my account", 0.85),
        ("user info", 0.85), ("my data", 0.8),
    )),
    (F.SCHEDULE_DELIVERY, (
        ("schedule delivery", 0.95), ("book delivery", 0.9), ("arrange pickup", 0.9),
        ("delivery date", 0.85), ("pickup schedule", 0.9), ("schedule pickup", 0.95),
        ("delivery time", 0.85), ("when to deliver", 0.85),
    )),
    (F.REPORT_ISSUE, (
        ("report issue", 0.95), ("problem", 0.8), ("complaint", 0.85), ("issue", 0.8),
        ("bug", 0.75), ("report problem", 0.9), ("file complaint", 0.9),
        ("help issue", 0.8), ("something wrong", 0.75),
    )),
    (F.TRACK_ORDER, (
        ("track order", 0.95), ("order status", 0.95), ("where is order", 0.85),
        ("order tracking", 0.95), ("my order", 0.8), ("order location", 0.85),
        ("track my order", 0.95), ("order delivery", 0.9),
    )),
    (F.SEARCH_PRODUCTS, (
        ("search", 0.8), ("find product", 0.9), ("products", 0.7), ("buy", 0.7),
        ("shop", 0.7), ("search for", 0.85), ("find", 0.8), ("looking for", 0.75),
        ("need", 0.7), ("want to buy", 0.75),
    )),
    (F.GET_ORDER_STATUS, (
        ("order status", 0.95), ("my order", 0.85), ("order info", 0.9),
        ("order details", 0.9), ("check order", 0.9), ("order history", 0.85),
        ("recent order", 0.85), ("last order", 0.85),
    )),
    (F.FIND_FARMER, (
        ("find farmer", 0.95), ("nearby farmer", 0.9), ("local farmer", 0.9),
        ("farmer near", 0.9), ("farmers", 0.7), ("farmer location", 0.85),
        ("nearest farmer", 0.9), ("find local", 0.85),
    )),
    (F.CHECK_CARBON_FOOTPRINT, (
        ("carbon footprint", 0.95), ("carbon", 0.8), ("environmental impact", 0.9),
        ("eco friendly", 0.8), ("carbon emissions", 0.9), ("environment", 0.75),
        ("green", 0.7), ("sustainability", 0.8),
    )),
    (F.GET_PRODUCT_INFO, (
        ("product info", 0.95), ("product details", 0.95), ("about product", 0.85),
        ("product information", 0.95), ("tell me about", 0.8), ("what is", 0.75),
        ("product description", 0.9), ("product specs", 0.85),
    )),
    (F.CANCEL_ORDER, (
        ("cancel order", 0.95), ("cancel", 0.85), ("refund", 0.8),
        ("return order", 0.85), ("cancel my order", 0.9), ("want to cancel", 0.85),
        ("order cancellation", 0.9),
    )),
    (F.GET_RECEIPT, (
        ("receipt", 0.9), ("invoice", 0.85), ("bill", 0.8), ("order receipt", 0.9),
        ("download receipt", 0.9), ("get receipt", 0.9), ("show receipt", 0.85),
        ("receipt copy", 0.85),
    )),
    (F.CHECK_INVENTORY, (
        ("inventory", 0.9), ("stock", 0.85), ("check stock", 0.9),
        ("inventory status", 0.95), ("stock level", 0.9), ("available stock", 0.9),
        ("inventory check", 0.95), ("warehouse stock", 0.9),
    )),
    (F.GET_WAREHOUSE_STATS, (
        ("warehouse stats", 0.95), ("warehouse statistics", 0.95),
        ("warehouse report", 0.9), ("warehouse data", 0.85),
        ("warehouse metrics", 0.9), ("warehouse performance", 0.9), ("stats", 0.8),
    )),
    (F.TRACK_PRODUCT_MOVEMENT, (
        ("track product", 0.9), ("product movement", 0.95), ("product location", 0.9),
        ("where is product", 0.85), ("product tracking", 0.95),
        ("product status", 0.9), ("movement history", 0.9), ("product history", 0.85),
    )),
    (F.SCHEDULE_PICKUP, (
        ("schedule pickup", 0.95), ("book pickup", 0.9), ("arrange pickup", 0.9),
        ("pickup date", 0.85), ("pickup time", 0.85), ("when pickup", 0.85),
        ("pickup schedule", 0.95), ("collect from", 0.85),
    )),
    (F.UPDATE_STORAGE_CONDITIONS, (
        ("storage conditions", 0.95), ("temperature", 0.85), ("humidity", 0.85),
        ("update conditions", 0.9), ("storage temp", 0.9),
        ("warehouse conditions", 0.9), ("storage environment", 0.9),
        ("climate control", 0.85),
    )),
    (F.GENERATE_REPORT, (
        ("generate report", 0.95), ("create report", 0.95), ("report", 0.8),
        ("download report", 0.9), ("export report", 0.9), ("get report", 0.9),
        ("warehouse report", 0.85), ("inventory report", 0.85),
    )),
    (F.GET_ANALYTICS, (
        ("analytics", 0.9), ("statistics", 0.85), ("data", 0.7), ("insights", 0.8),
        ("metrics", 0.8), ("system analytics", 0.95), ("platform stats", 0.9),
        ("analytics report", 0.9), ("dashboard data", 0.85),
    )),
    (F.GET_USER_STATS, (
        ("user stats", 0.95), ("user statistics", 0.95), ("user data", 0.85),
        ("user count", 0.9), ("how many users", 0.85), ("user analytics", 0.9),
        ("user report", 0.9), ("users", 0.7),
    )),
    (F.VIEW_TRANSACTIONS, (
        ("transactions", 0.9), ("transaction list", 0.95), ("payment history", 0.85),
        ("all transactions", 0.9), ("view transactions", 0.95),
        ("transaction report", 0.9), ("payment data", 0.85), ("transaction data", 0.85),
    )),
    (F.MANAGE_USERS, (
        ("manage users", 0.95), ("user management", 0.95), ("users", 0.7),
        ("user list", 0.85), ("edit user", 0.9), ("user admin", 0.9),
        ("user control", 0.85), ("user settings", 0.85),
    )),
    (F.SYSTEM_HEALTH_CHECK, (
        ("system health", 0.95), ("health check", 0.95), ("system status", 0.9),
        ("server status", 0.9), ("system monitoring", 0.95), ("health", 0.8),
        ("system check", 0.9), ("server health", 0.9),
    )),
    (F.VIEW_LOGS, (
        ("logs", 0.85), ("system logs", 0.95), ("error logs", 0.9), ("view logs", 0.95),
        ("log file", 0.9), ("activity logs", 0.9), ("server logs", 0.9),
        ("application logs", 0.9),
    )),
)
