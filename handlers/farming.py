"""Farmer-facing handlers: advice, weather, prices, logistics and support."""

from models import FunctionName as F, FunctionResult
from seasons import (
    current_season, normalize_season, weather_forecast, temperature_range,
    rainfall_info, farming_tips, recommended_crops, SEASON_ADVICE,
)
from handlers.registry import handler, fmt_date
from config.settings import DEFAULT_REGION, DEFAULT_AREA

# ₹ per quintal
MARKET_PRICES = {
    "rice": {"msp": 2040, "market": 2200},
    "wheat": {"msp": 2015, "market": 2150},
    "maize": {"msp": 1870, "market": 1950},
    "cotton": {"msp": 6080, "market": 6200},
    "sugarcane": {"msp": 2900, "market": 3100},
}
BENCHMARK_CROP = "rice"


@handler(F.FETCH_CROP_ADVICE, latency=1.2)
async def fetch_crop_advice(params, user, role, ctx):
    location = params.location or user.state or user.district or DEFAULT_REGION
    season = normalize_season(params.season) or current_season(ctx.now())
    crops = recommended_crops(season)
    bullets = "\n".join(f"• {c}" for c in crops)
    guidance = SEASON_ADVICE.get(
        season, "Plan your crops based on local weather patterns and soil conditions."
    )

    message = (
        f"🌾 **Crop Advice for {location}** ({season} season)\n\n"
        f"**Recommended Crops:**\n{bullets}\n\n"
        f"**Seasonal Guidance:**\n{guidance}\n\n"
        f"**Optimal Planting Window:** Next 2-3 weeks\n"
        f"**Expected Weather:** {weather_forecast(season)}\n"
        f"**Soil Condition:** Good for cultivation (recommend soil test for specific nutrients)\n\n"
        f"**Additional Tips:**\n"
        f"• Ensure proper irrigation before planting\n"
        f"• Use certified seeds for better yield\n"
        f"• Apply organic fertilizers for sustainable farming\n"
        f"• Monitor for pests and diseases regularly\n\n"
        f"Would you like detailed advice for any specific crop?"
    )
    return FunctionResult(True, message, {
        "location": location,
        "season": season,
        "recommended_crops": crops,
        "planting_window": "Next 2-3 weeks",
    })


@handler(F.GET_WEATHER_FORECAST, latency=1.0)
async def get_weather_forecast(params, user, role, ctx):
    location = params.location or user.state or user.district or DEFAULT_REGION
    season = normalize_season(params.season) or current_season(ctx.now())

    message = (
        f"🌤️ **Weather Forecast for {location}**\n\n"
        f"**Today:**\n"
        f"• Temperature: {temperature_range(season)}\n"
        f"• Condition: {weather_forecast(season)}\n"
        f"• Rainfall: {rainfall_info(season)}\n"
        f"• Humidity: 65-75%\n\n"
        f"**Next 3 Days:**\n"
        f"• Day 1: Moderate temperature, light showers expected\n"
        f"• Day 2: Clear skies, ideal for farming activities\n"
        f"• Day 3: Cloudy with chance of rain\n\n"
        f"**Farming Recommendations:**\n{farming_tips(season)}\n\n"
        f"Would you like detailed crop advice based on this forecast?"
    )
    return FunctionResult(True, message, {
        "location": location,
        "season": season,
        "forecast": weather_forecast(season),
    })


@handler(F.CHECK_MARKET_PRICES, latency=1.2)
async def check_market_prices(params, user, role, ctx):
    crop = params.crop or "Rice"
    key = crop.lower()
    prices = MARKET_PRICES.get(key, MARKET_PRICES[BENCHMARK_CROP])
    msp, market = prices["msp"], prices["market"]
    diff = market - msp
    pct = diff / msp * 100
    above = market > msp

    note = ""
    if key not in MARKET_PRICES:
        note = f"\n\n_No MSP listed for {crop}; showing the {BENCHMARK_CROP.title()} benchmark._"

    message = (
        f"💰 **Market Prices for {crop}**\n\n"
        f"**MSP (Minimum Support Price):** ₹{msp}/quintal\n"
        f"**Current Market Price:** ₹{market}/quintal\n"
        f"**Price Difference:** ₹{diff}/quintal ({pct:.1f}% {'above' if diff >= 0 else 'below'} MSP)\n\n"
        f"**Market Status:** {'Good - Above MSP' if above else 'Below MSP - Consider selling to government'}\n\n"
        f"**Recommendation:** "
        f"{'You can sell in open market for better price' if above else 'Consider selling to government at MSP for guaranteed price'}"
        f"{note}"
    )
    return FunctionResult(True, message, {"crop": crop, "msp": msp, "market_price": market})


@handler(F.TRACK_SHIPMENT, latency=1.0)
async def track_shipment(params, user, role, ctx):
    tracking_id = params.tracking_id or ctx.ids.token("TRK")
    eta = ctx.days_from_now(2)
    district = user.district or "District"

    message = (
        f"📦 **Shipment Tracking**\n\n"
        f"**Tracking ID:** {tracking_id}\n"
        f"**Status:** In Transit\n"
        f"**Current Location:** Warehouse Hub, {district}\n"
        f"**Estimated Delivery:** {fmt_date(eta)}\n\n"
        f"**Timeline:**\n"
        f"• ✅ Picked up from farm - {fmt_date(ctx.days_from_now(-1))}\n"
        f"• 🚚 In transit to warehouse - {fmt_date(ctx.now())}\n"
        f"• ⏳ Arriving at warehouse - Tomorrow\n"
        f"• 📍 Out for delivery - {fmt_date(eta)}\n\n"
        f"Your shipment is on track! Would you like live location updates?"
    )
    return FunctionResult(True, message, {
        "tracking_id": tracking_id,
        "status": "in_transit",
        "estimated_delivery": eta.isoformat(),
    })


@handler(F.FIND_WAREHOUSE, latency=0.8)
async def find_warehouse(params, user, role, ctx):
    location = params.location or user.district or user.state or DEFAULT_AREA
    district = user.district or "District"

    message = (
        f"🏭 **Warehouses Near {location}**\n\n"
        f"**Available Warehouses:**\n\n"
        f"1. **GreenLedger Warehouse Hub - {district}**\n"
        f"   • Capacity: 5000 tons\n   • Occupancy: 75%\n   • Distance: 15 km\n"
        f"   • Contact: +91-99999-00002\n\n"
        f"2. **Regional Storage Center**\n"
        f"   • Capacity: 3000 tons\n   • Occupancy: 60%\n   • Distance: 25 km\n"
        f"   • Contact: +91-99999-00003\n\n"
        f"3. **Local Collection Point**\n"
        f"   • Capacity: 1000 tons\n   • Occupancy: 40%\n   • Distance: 8 km\n"
        f"   • Contact: +91-99999-00004\n\n"
        f"**Recommendation:** GreenLedger Warehouse Hub is closest and has good capacity.\n\n"
        f"Would you like to schedule a delivery?"
    )
    return FunctionResult(True, message, {"location": location, "warehouses": 3})


@handler(F.CHECK_SUBSIDY_ELIGIBILITY, latency=1.0)
async def check_subsidy_eligibility(params, user, role, ctx):
    message = (
        "🏛️ **Subsidy Eligibility Check**\n\n"
        "**Your Eligibility Status:** ✅ Eligible\n\n"
        "**Available Schemes:**\n\n"
        "1. **PM-KISAN**\n   • Status: ✅ Eligible\n   • Amount: ₹6000/year\n"
        "   • Next Installment: Next month\n   • Application: Already registered\n\n"
        "2. **Crop Insurance (Pradhan Mantri Fasal Bima Yojana)**\n   • Status: ✅ Eligible\n"
        "   • Coverage: Up to ₹50,000\n   • Premium: Subsidized\n\n"
        "3. **Soil Health Card Scheme**\n   • Status: ✅ Eligible\n"
        "   • Benefit: Free soil testing\n   • Next Test: Available anytime\n\n"
        "4. **Kisan Credit Card**\n   • Status: ✅ Eligible\n"
        "   • Credit Limit: Up to ₹3,00,000\n   • Interest: 4% per annum\n\n"
        "**Total Annual Benefits:** ₹6,000 + Insurance + Credit facilities\n\n"
        "Would you like to apply for any scheme?"
    )
    return FunctionResult(True, message, {
        "eligible": True,
        "schemes": ["PM-KISAN", "Crop Insurance", "Soil Testing", "KCC"],
    })


@handler(F.GET_FARMER_INFO, latency=0.6)
async def get_farmer_info(params, user, role, ctx):
    crops = ", ".join(str(c) for c in (user.crops or ["Rice", "Wheat"]))
    status = "✅ Verified" if user.verified else "⏳ Pending Verification"

    message = (
        f"👤 **Farmer Profile**\n\n"
        f"**Name:** {user.name or 'N/A'}\n"
        f"**Uzhavar PIN:** {user.uzhavar_pin or 'Not assigned'}\n"
        f"**Location:** {user.district or 'N/A'}, {user.state or 'N/A'}\n"
        f"**Farm Size:** {user.land_size or 'N/A'}\n"
        f"**Crops:** {crops}\n"
        f"**Status:** {status}\n"
        f"**Join Date:** {user.join_date or 'N/A'}\n\n"
        f"**Statistics:**\n"
        f"• Total Income: ₹{int(user.total_income or 0):,}\n"
        f"• Monthly Growth: {user.monthly_growth or 0}%\n"
        f"• Green Points: {user.green_points or 0}\n\n"
        f"Would you like to update any information?"
    )
    return FunctionResult(True, message, {"farmer": {
        "id": user.id,
        "name": user.name,
        "uzhavar_pin": user.uzhavar_pin,
        "district": user.district,
        "state": user.state,
        "crops": list(user.crops),
        "verified": user.verified,
    }})


@handler(F.SCHEDULE_DELIVERY, latency=1.2)
async def schedule_delivery(params, user, role, ctx):
    date = params.date or fmt_date(ctx.days_from_now(3))
    delivery_id = ctx.ids.token("DEL")

    message = (
        f"📅 **Delivery Scheduled**\n\n"
        f"**Delivery ID:** {delivery_id}\n"
        f"**Scheduled Date:** {date}\n"
        f"**Pickup Location:** Your farm, {user.district or 'District'}\n"
        f"**Destination:** Nearest warehouse\n"
        f"**Status:** Confirmed\n\n"
        f"**Next Steps:**\n"
        f"1. Prepare your produce for pickup\n"
        f"2. Ensure proper packaging\n"
        f"3. Our team will contact you 1 day before pickup\n"
        f"4. Track your delivery using ID: {delivery_id}\n\n"
        f"You'll receive a notification reminder 24 hours before pickup."
    )
    return FunctionResult(True, message, {"delivery_id": delivery_id, "date": date, "status": "scheduled"})


@handler(F.REPORT_ISSUE, latency=0.8)
async def report_issue(params, user, role, ctx):
    issue_id = ctx.ids.token("ISSUE")

    message = (
        f"📝 **Issue Reported**\n\n"
        f"**Issue ID:** {issue_id}\n"
        f"**Type:** {params.issue_type}\n"
        f"**Status:** Under Review\n"
        f"**Priority:** {params.priority}\n\n"
        f"**Description:** {params.description or 'Issue reported'}\n\n"
        f"**Expected Resolution:** Within 24-48 hours\n"
        f"**Contact:** Support team will reach out to you at {user.phone or 'your registered number'}\n\n"
        f"You'll receive updates via SMS and in-app notifications. Thank you for reporting!"
    )
    return FunctionResult(True, message, {
        "issue_id": issue_id,
        "type": params.issue_type,
        "priority": params.priority,
        "status": "under_review",
    })
