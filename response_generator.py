"""
Templated replies for messages that did not match any function.

Role-aware: each role has a few topic keyword groups that produce a
focused reply; anything else gets a clarification prompt that restates
what the role can ask about.
"""

from datetime import date
from typing import Optional, Sequence

from models import Role, UserProfile, ChatMessage, CapabilityProfile
from seasons import (
    current_season, weather_forecast, temperature_range, rainfall_info, farming_tips,
)
from config.settings import DEFAULT_REGION

ROLE_TOPICS = {
    Role.FARMER: "farming, crops, weather, or government schemes",
    Role.CONSUMER: "products, orders, or delivery",
    Role.WAREHOUSE: "inventory, storage, or logistics",
    Role.ADMIN: "system management and analytics",
}
GENERAL_TOPICS = "the GreenLedger platform"


def _mentions(text: str, *words: str) -> bool:
    return any(w in text for w in words)


# ─────────────────────────────────────────────
# Farmer
# ─────────────────────────────────────────────

def _farmer_weather(user: UserProfile, today: date) -> str:
    season = current_season(today)
    return (
        f"🌤️ **Weather Information for {user.region or DEFAULT_REGION}**\n\n"
        f"**Current Season:** {season.capitalize()}\n"
        f"**Expected Conditions:** {weather_forecast(season)}\n"
        f"**Temperature Range:** {temperature_range(season)}\n"
        f"**Rainfall:** {rainfall_info(season)}\n\n"
        f"**Farming Recommendations:**\n{farming_tips(season)}\n\n"
        f"Would you like me to fetch detailed crop advice based on this weather?"
    )


def _farmer_crops(user: UserProfile, today: date) -> str:
    season = current_season(today)
    crops = ", ".join(str(c) for c in (user.crops or ["Rice", "Wheat", "Vegetables"]))
    return (
        f"🌾 **Crop Information**\n\n"
        f"Based on your profile, you're growing: {crops}\n\n"
        f"**Current Recommendations:**\n"
        f"• **Planting:** Optimal time is now for {season} season crops\n"
        f"• **Irrigation:** Ensure adequate water supply, especially during {season}\n"
        f"• **Fertilizer:** Apply organic fertilizers for better yield\n"
        f"• **Pest Control:** Monitor regularly and use eco-friendly pesticides\n\n"
        f"**Government Schemes Available:**\n"
        f"• PM-KISAN: ₹6000/year direct benefit\n"
        f"• Crop Insurance: Protection against crop loss\n"
        f"• MSP Support: Minimum price guarantee for major crops\n\n"
        f"Would you like specific advice for any crop or help with government schemes?"
    )


FARMER_SCHEMES = (
    "🏛️ **Government Schemes & Subsidies**\n\n"
    "**Available Schemes:**\n"
    "1. **PM-KISAN** - ₹6000 per year in 3 installments\n"
    "2. **Pradhan Mantri Fasal Bima Yojana** - Crop insurance\n"
    "3. **Kisan Credit Card** - Easy loans for farmers\n"
    "4. **Soil Health Card** - Free soil testing\n"
    "5. **MSP (Minimum Support Price)** - Guaranteed prices for crops\n\n"
    "**Eligibility:** Most schemes are available to all farmers\n"
    "**Application:** Can be done online or at local agriculture office\n\n"
    "Would you like detailed information about any specific scheme or help with application?"
)

FARMER_HELP = (
    "👋 **How can I help you?**\n\n"
    "I can assist you with:\n"
    "• 🌾 Crop advice and recommendations\n"
    "• 💰 Payment processing\n"
    "• 📱 Sending notifications\n"
    "• 📝 Updating ledger records\n"
    "• 🔲 Generating QR codes\n"
    "• 🌤️ Weather information\n"
    "• 🏛️ Government schemes\n\n"
    "Just ask me anything about farming, or tell me what you'd like to do!"
)

# ─────────────────────────────────────────────
# Consumer / warehouse / admin
# ─────────────────────────────────────────────

CONSUMER_ORDERS = (
    "📦 **Order Tracking**\n\n"
    "I can help you track your orders and deliveries.\n\n"
    "**Available Actions:**\n"
    "• Track current orders\n• Check delivery status\n"
    "• View order history\n• Get delivery updates\n\n"
    "Would you like me to show your recent orders or track a specific order?"
)

CONSUMER_SHOPPING = (
    "🛒 **Shopping Assistance**\n\n"
    "I can help you find and purchase products from local farmers!\n\n"
    "**Features:**\n"
    "• Browse organic products\n• Find local farmers\n"
    "• Check product quality via QR codes\n• Track carbon footprint\n• Secure payments\n\n"
    "What are you looking for today?"
)

WAREHOUSE_INVENTORY = (
    "📊 **Inventory Management**\n\n"
    "I can help you manage warehouse inventory and operations.\n\n"
    "**Available Features:**\n"
    "• Check stock levels\n• Track product movements\n"
    "• Monitor storage conditions\n• Generate reports\n• Update ledger records\n\n"
    "What would you like to know about your inventory?"
)

ADMIN_DASHBOARD = (
    "⚙️ **Admin Dashboard**\n\n"
    "I can help you with system administration and management.\n\n"
    "**Available Actions:**\n"
    "• User management\n• System monitoring\n• Generate reports\n"
    "• View analytics\n• Transaction oversight\n\n"
    "What would you like to manage or check?"
)


def _topic_reply(text: str, role: Optional[Role], user: UserProfile, today: date) -> Optional[str]:
    """Reply for the first matching topic group of *role*, or None."""
    if role == Role.FARMER:
        if _mentions(text, "weather", "rain", "temperature"):
            return _farmer_weather(user, today)
        if _mentions(text, "crop", "plant", "harvest"):
            return _farmer_crops(user, today)
        if _mentions(text, "scheme", "subsidy", "government"):
            return FARMER_SCHEMES
        if _mentions(text, "help", "how", "what"):
            return FARMER_HELP
    elif role == Role.CONSUMER:
        if _mentions(text, "order", "track", "delivery"):
            return CONSUMER_ORDERS
        if _mentions(text, "product", "buy", "shop"):
            return CONSUMER_SHOPPING
    elif role == Role.WAREHOUSE:
        if _mentions(text, "inventory", "stock", "storage"):
            return WAREHOUSE_INVENTORY
    elif role == Role.ADMIN:
        if _mentions(text, "user", "system", "report"):
            return ADMIN_DASHBOARD
    return None


def generate_reply(
    message: str,
    role,
    profile: CapabilityProfile,
    history: Optional[Sequence[ChatMessage]] = None,
    user: Optional[UserProfile] = None,
    today: Optional[date] = None,
) -> str:
    """
    Narrative reply for an unmatched message.

    Order: role topic keywords, then a short context reply if the last
    history entry asked for help, then the generic clarification prompt.
    """
    text = (message or "").lower()
    parsed = Role.parse(role)
    user = user or UserProfile()
    today = today or date.today()

    reply = _topic_reply(text, parsed, user, today)
    if reply:
        return reply

    last = (history[-1].content if history else "") or ""
    if _mentions(last.lower(), "help", "what can"):
        return (
            f"I'm here to help with {profile.context_description}. You can ask me questions "
            f"or request actions like payments, notifications, or information. "
            f"What would you like to know or do?"
        )

    topics = ROLE_TOPICS.get(parsed, GENERAL_TOPICS)
    return (
        f"I understand you're asking about \"{message}\".\n\n"
        f"I can help you with {profile.context_description}.\n\n"
        f"**You can:**\n"
        f"• Ask questions about {topics}\n"
        f"• Request actions like payments or notifications\n"
        f"• Get specific information or advice\n\n"
        f"Could you provide more details or try rephrasing your question?"
    )
