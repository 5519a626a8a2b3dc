"""
Registry of what each role may ask the assistant to do.

Static data, built once at import. Unknown roles resolve to a profile with
no functions so nothing side-effecting can be dispatched for them.
"""

from typing import Dict, Union

from models import Role, FunctionName as F, CapabilityProfile


ROLE_CAPABILITIES: Dict[Role, CapabilityProfile] = {
    Role.FARMER: CapabilityProfile(
        functions=frozenset({
            F.CREATE_PAYMENT, F.SEND_NOTIFICATION, F.UPDATE_LEDGER,
            F.FETCH_CROP_ADVICE, F.GENERATE_QR, F.GET_WEATHER_FORECAST,
            F.CHECK_MARKET_PRICES, F.TRACK_SHIPMENT, F.FIND_WAREHOUSE,
            F.CHECK_SUBSIDY_ELIGIBILITY, F.GET_FARMER_INFO,
            F.SCHEDULE_DELIVERY, F.REPORT_ISSUE,
        }),
        context_description=(
            "farming, agriculture, crops, weather, soil, government schemes, "
            "subsidies, payments, ledger, harvest, irrigation, pest control"
        ),
        knowledge_snippets=(
            "Rice cultivation requires 120-150 days",
            "Wheat is best planted in October-November",
            "Government provides MSP (Minimum Support Price) for major crops",
            "PM-KISAN scheme provides ₹6000 per year to farmers",
            "Soil testing should be done before planting",
            "Crop rotation improves soil fertility",
        ),
    ),
    Role.CONSUMER: CapabilityProfile(
        functions=frozenset({
            F.CREATE_PAYMENT, F.SEND_NOTIFICATION, F.TRACK_ORDER,
            F.SEARCH_PRODUCTS, F.GET_ORDER_STATUS, F.FIND_FARMER,
            F.CHECK_CARBON_FOOTPRINT, F.GET_PRODUCT_INFO,
            F.SCHEDULE_DELIVERY, F.CANCEL_ORDER, F.GET_RECEIPT,
        }),
        context_description=(
            "shopping, products, orders, delivery, tracking, carbon footprint, "
            "payments, organic food, local produce"
        ),
        knowledge_snippets=(
            "Organic products have lower carbon footprint",
            "Local produce is fresher and supports farmers",
            "QR codes help track product origin",
            "Seasonal vegetables are more nutritious",
        ),
    ),
    Role.WAREHOUSE: CapabilityProfile(
        functions=frozenset({
            F.SEND_NOTIFICATION, F.UPDATE_LEDGER, F.CHECK_INVENTORY,
            F.GET_WAREHOUSE_STATS, F.TRACK_PRODUCT_MOVEMENT,
            F.SCHEDULE_PICKUP, F.UPDATE_STORAGE_CONDITIONS,
            F.GENERATE_REPORT, F.FIND_FARMER, F.GET_PRODUCT_INFO,
        }),
        context_description=(
            "inventory, storage, product movement, logistics, warehouse operations, "
            "temperature control, quality check"
        ),
        knowledge_snippets=(
            "Optimal storage temperature for grains: 15-20°C",
            "Humidity should be below 60% for most crops",
            "FIFO (First In First Out) ensures freshness",
            "Regular inventory audits prevent losses",
        ),
    ),
    Role.ADMIN: CapabilityProfile(
        functions=frozenset({
            F.CREATE_PAYMENT, F.SEND_NOTIFICATION, F.UPDATE_LEDGER,
            F.FETCH_CROP_ADVICE, F.GENERATE_QR, F.GET_ANALYTICS,
            F.GET_USER_STATS, F.VIEW_TRANSACTIONS, F.MANAGE_USERS,
            F.GENERATE_REPORT, F.SYSTEM_HEALTH_CHECK, F.VIEW_LOGS,
        }),
        context_description=(
            "system administration, user management, analytics, monitoring, "
            "reports, transactions, security"
        ),
        knowledge_snippets=(
            "System monitoring helps prevent issues",
            "User analytics provide insights",
            "Regular backups are essential",
            "Security audits should be monthly",
        ),
    ),
}

DEFAULT_PROFILE = CapabilityProfile(
    functions=frozenset(),
    context_description="general questions about the GreenLedger platform",
    knowledge_snippets=(),
)


def capabilities_for(role: Union[Role, str, None]) -> CapabilityProfile:
    """Look up the capability profile for *role*; unknown roles get DEFAULT_PROFILE."""
    parsed = Role.parse(role)
    if parsed is None:
        return DEFAULT_PROFILE
    return ROLE_CAPABILITIES.get(parsed, DEFAULT_PROFILE)
