"""Warehouse handlers: stock, movement, pickups, storage and reports."""

from models import FunctionName as F, FunctionResult
from handlers.registry import handler, fmt_date, fmt_datetime, humanize

OPTIMAL_TEMPERATURE = 18
OPTIMAL_HUMIDITY = 55


@handler(F.CHECK_INVENTORY, latency=1.0)
async def check_inventory(params, user, role, ctx):
    message = (
        "📊 **Inventory Status**\n\n"
        "**Total Capacity:** 5,000 tons\n"
        "**Current Stock:** 3,750 tons (75%)\n"
        "**Available Space:** 1,250 tons\n\n"
        "**By Category:**\n"
        "• Rice: 1,500 tons (60% capacity)\n• Wheat: 1,200 tons (80% capacity)\n"
        "• Vegetables: 800 tons (70% capacity)\n• Pulses: 250 tons (50% capacity)\n\n"
        f"**Storage Conditions:**\n"
        f"• Temperature: {OPTIMAL_TEMPERATURE}°C ✅ Optimal\n"
        f"• Humidity: {OPTIMAL_HUMIDITY}% ✅ Good\n• Quality: Excellent ✅\n\n"
        "**Alerts:**\n"
        "• Wheat storage at 80% - Consider distribution\n"
        "• Pulses low stock - Schedule pickup\n\n"
        "**Recommendations:**\n"
        "• Plan distribution for high-occupancy items\n"
        "• Schedule new pickups for low-stock items"
    )
    return FunctionResult(True, message, {"total_capacity": 5000, "current_stock": 3750, "occupancy": 75})


@handler(F.GET_WAREHOUSE_STATS, latency=0.8)
async def get_warehouse_stats(params, user, role, ctx):
    message = (
        "📈 **Warehouse Statistics**\n\n"
        "**Overview:**\n"
        "• Total Capacity: 5,000 tons\n• Current Occupancy: 75%\n"
        "• Monthly Turnover: 2,500 tons\n• Active Products: 45 types\n\n"
        "**Performance Metrics:**\n"
        "• Efficiency: 92% ⭐⭐⭐⭐⭐\n• Quality Score: 4.8/5.0\n"
        "• On-time Delivery: 96%\n• Customer Satisfaction: 4.7/5.0\n\n"
        "**This Month:**\n"
        "• Products Received: 1,200 tons\n• Products Shipped: 1,150 tons\n"
        "• Growth: +12% from last month\n\n"
        "**Top Products:**\n1. Rice - 1,500 tons\n2. Wheat - 1,200 tons\n3. Vegetables - 800 tons\n\n"
        "**Revenue:** ₹12,50,000 this month\n\n"
        "Would you like detailed analytics?"
    )
    return FunctionResult(True, message, {"occupancy": 75, "efficiency": 92, "revenue": 1250000})


@handler(F.TRACK_PRODUCT_MOVEMENT, latency=1.0)
async def track_product_movement(params, user, role, ctx):
    product_id = params.product_id or ctx.ids.token("PROD")
    received = fmt_datetime(ctx.days_from_now(-2))
    checked = fmt_datetime(ctx.days_from_now(-1))

    message = (
        f"🚚 **Product Movement Tracking**\n\n"
        f"**Product ID:** {product_id}\n"
        f"**Status:** In Warehouse\n"
        f"**Location:** Storage Bay A-12\n\n"
        f"**Movement History:**\n"
        f"• 📍 Received from Farm - {received}\n"
        f"• ✅ Quality Check Passed - {checked}\n"
        f"• 📦 Stored in Bay A-12 - {checked}\n"
        f"• ⏳ Scheduled for Shipment - Tomorrow\n\n"
        f"**Storage Details:**\n"
        f"• Temperature: {OPTIMAL_TEMPERATURE}°C ✅\n• Humidity: {OPTIMAL_HUMIDITY}% ✅\n"
        f"• Quality: Excellent ✅\n\n"
        f"**Next Action:** Ready for shipment tomorrow"
    )
    return FunctionResult(True, message, {"product_id": product_id, "status": "in_warehouse", "location": "Bay A-12"})


@handler(F.SCHEDULE_PICKUP, latency=1.2)
async def schedule_pickup(params, user, role, ctx):
    pickup_id = ctx.ids.token("PICK")
    date = params.date or fmt_date(ctx.days_from_now(2))

    message = (
        f"📅 **Pickup Scheduled**\n\n"
        f"**Pickup ID:** {pickup_id}\n"
        f"**Scheduled Date:** {date}\n"
        f"**Location:** {params.location or 'Farm location'}\n"
        f"**Status:** Confirmed\n\n"
        f"**Details:**\n"
        f"• Pickup Time: 10:00 AM - 2:00 PM\n• Vehicle: Medium truck\n"
        f"• Driver: Will be assigned\n• Contact: +91-99999-00002\n\n"
        f"**Next Steps:**\n"
        f"1. Prepare products for pickup\n2. Ensure proper packaging\n"
        f"3. Our team will contact you 1 day before\n"
        f"4. Track pickup using ID: {pickup_id}\n\n"
        f"You'll receive a notification 24 hours before pickup."
    )
    return FunctionResult(True, message, {"pickup_id": pickup_id, "date": date, "status": "scheduled"})


@handler(F.UPDATE_STORAGE_CONDITIONS, latency=0.8)
async def update_storage_conditions(params, user, role, ctx):
    temperature = params.temperature if params.temperature is not None else OPTIMAL_TEMPERATURE
    humidity = params.humidity if params.humidity is not None else OPTIMAL_HUMIDITY

    message = (
        f"🌡️ **Storage Conditions Updated**\n\n"
        f"**Current Conditions:**\n"
        f"• Temperature: {temperature}°C ✅\n"
        f"• Humidity: {humidity}% ✅\n"
        f"• Air Quality: Good ✅\n• Ventilation: Optimal ✅\n\n"
        f"**Status:** All conditions within optimal range\n"
        f"**Last Updated:** {fmt_datetime(ctx.now())}\n\n"
        f"**Alerts:** None - All systems operating normally\n\n"
        f"**Recommendations:**\n"
        f"• Continue monitoring every 6 hours\n"
        f"• Maintain current temperature settings\n"
        f"• Check humidity levels daily\n\n"
        f"Storage conditions are optimal for product quality!"
    )
    return FunctionResult(True, message, {"temperature": temperature, "humidity": humidity, "status": "optimal"})


@handler(F.GENERATE_REPORT, latency=1.5)
async def generate_report(params, user, role, ctx):
    report_id = ctx.ids.token("RPT")
    now = ctx.now()

    message = (
        f"📄 **Report Generated**\n\n"
        f"**Report ID:** {report_id}\n"
        f"**Type:** {humanize(params.report_type)}\n"
        f"**Date Range:** Last 30 days\n"
        f"**Generated:** {fmt_datetime(now)}\n\n"
        f"**Report Contents:**\n"
        f"• Inventory summary\n• Product movements\n• Storage conditions\n"
        f"• Performance metrics\n• Recommendations\n\n"
        f"**Download:** Report is ready for download\n"
        f"**Format:** PDF & Excel available\n\n"
        f"**Key Highlights:**\n"
        f"• Total products: 3,750 tons\n• Monthly turnover: 2,500 tons\n"
        f"• Efficiency: 92%\n• Quality score: 4.8/5\n\n"
        f"Would you like to download the report?"
    )
    return FunctionResult(True, message, {"report_id": report_id, "type": params.report_type, "generated": now.isoformat()})
