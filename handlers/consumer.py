"""Consumer-facing handlers: orders, products, farmers and receipts."""

from datetime import timedelta

from models import FunctionName as F, FunctionResult
from handlers.registry import handler, fmt_date, fmt_datetime
from config.settings import DEFAULT_AREA

LATEST_ORDER = "latest"


@handler(F.TRACK_ORDER, latency=1.0)
async def track_order(params, user, role, ctx):
    order_id = params.order_id or ctx.ids.token("ORD")
    now = ctx.now()

    message = (
        f"📦 **Order Tracking**\n\n"
        f"**Order ID:** {order_id}\n"
        f"**Status:** Out for Delivery\n"
        f"**Current Location:** {user.district or 'District'} Distribution Center\n"
        f"**Estimated Delivery:** Today by 6 PM\n\n"
        f"**Timeline:**\n"
        f"• ✅ Order Placed - {fmt_date(ctx.days_from_now(-2))}\n"
        f"• ✅ Confirmed - {fmt_date(ctx.days_from_now(-1))}\n"
        f"• 🚚 Shipped - {fmt_datetime(now - timedelta(hours=12))}\n"
        f"• 🚛 Out for Delivery - {fmt_datetime(now)}\n"
        f"• ⏳ Expected Delivery - Today, 6 PM\n\n"
        f"**Delivery Address:** {user.address or 'Your registered address'}\n\n"
        f"Track live location?"
    )
    return FunctionResult(True, message, {
        "order_id": order_id,
        "status": "out_for_delivery",
        "estimated_delivery": (now + timedelta(hours=6)).isoformat(),
    })


@handler(F.SEARCH_PRODUCTS, latency=1.0)
async def search_products(params, user, role, ctx):
    query = params.query or "organic vegetables"
    near = user.district or "Nearby"

    message = (
        f"🛒 **Product Search Results**\n\n"
        f"**Search:** \"{query}\"\n"
        f"**Found:** 15 products\n\n"
        f"**Top Results:**\n\n"
        f"1. **Organic Tomatoes**\n   • Farmer: Ramesh Kumar\n   • Price: ₹40/kg\n"
        f"   • Rating: ⭐ 4.8\n   • Location: {near}\n\n"
        f"2. **Fresh Rice**\n   • Farmer: Suresh Patel\n   • Price: ₹45/kg\n"
        f"   • Rating: ⭐ 4.9\n   • Location: {near}\n\n"
        f"3. **Organic Wheat**\n   • Farmer: Priya Sharma\n   • Price: ₹50/kg\n"
        f"   • Rating: ⭐ 4.7\n   • Location: {near}\n\n"
        f"**Filters Available:**\n• Price range\n• Distance\n• Organic certification\n• Farmer rating\n\n"
        f"Would you like to see more products or filter results?"
    )
    return FunctionResult(True, message, {"query": query, "results": 15})


@handler(F.GET_ORDER_STATUS, latency=0.8)
async def get_order_status(params, user, role, ctx):
    order_id = params.order_id or LATEST_ORDER

    message = (
        f"📋 **Order Status**\n\n"
        f"**Order ID:** {order_id}\n"
        f"**Status:** ✅ Delivered\n"
        f"**Delivery Date:** {fmt_date(ctx.days_from_now(-1))}\n\n"
        f"**Order Details:**\n"
        f"• Items: 3 products\n• Total Amount: ₹1,250\n"
        f"• Payment: ✅ Paid\n• Delivery: ✅ Completed\n\n"
        f"**Items Delivered:**\n"
        f"1. Organic Rice - 5kg\n2. Fresh Vegetables - 2kg\n3. Organic Wheat - 3kg\n\n"
        f"**Rating:** Please rate your order experience!\n\n"
        f"Would you like to view receipt or reorder?"
    )
    return FunctionResult(True, message, {"order_id": order_id, "status": "delivered", "total": 1250})


@handler(F.FIND_FARMER, latency=1.0)
async def find_farmer(params, user, role, ctx):
    location = params.location or user.district or DEFAULT_AREA

    message = (
        f"👨‍🌾 **Farmers Near {location}**\n\n"
        f"**Found:** 12 verified farmers\n\n"
        f"**Top Farmers:**\n\n"
        f"1. **Ramesh Kumar**\n   • Crops: Rice, Vegetables\n   • Rating: ⭐ 4.9\n"
        f"   • Distance: 5 km\n   • Uzhavar PIN: UZP-123456\n\n"
        f"2. **Suresh Patel**\n   • Crops: Wheat, Pulses\n   • Rating: ⭐ 4.8\n"
        f"   • Distance: 8 km\n   • Uzhavar PIN: UZP-234567\n\n"
        f"3. **Priya Sharma**\n   • Crops: Organic Vegetables\n   • Rating: ⭐ 4.9\n"
        f"   • Distance: 12 km\n   • Uzhavar PIN: UZP-345678\n\n"
        f"**Filter Options:**\n• By crop type\n• By distance\n• By rating\n• By certification\n\n"
        f"Would you like to see products from any specific farmer?"
    )
    return FunctionResult(True, message, {"location": location, "farmers": 12})


@handler(F.CHECK_CARBON_FOOTPRINT, latency=0.8)
async def check_carbon_footprint(params, user, role, ctx):
    message = (
        "🌱 **Carbon Footprint Analysis**\n\n"
        "**Your Total Carbon Footprint:** 2.3 kg CO2\n"
        "**Industry Average:** 5.1 kg CO2\n"
        "**Savings:** 55% lower than average! 🌟\n\n"
        "**Breakdown:**\n"
        "• Local sourcing: -1.2 kg CO2\n• Organic products: -0.8 kg CO2\n"
        "• Minimal packaging: -0.3 kg CO2\n\n"
        "**Impact:**\n• Trees saved: Equivalent to 12 trees\n"
        "• Environmental score: ⭐⭐⭐⭐⭐\n\n"
        "**Tips to reduce further:**\n• Buy more seasonal products\n"
        "• Choose local farmers\n• Use reusable bags\n\n"
        "Keep up the great work! You're making a positive impact!"
    )
    return FunctionResult(True, message, {"footprint": 2.3, "average": 5.1, "savings": 55})


@handler(F.GET_PRODUCT_INFO, latency=0.6)
async def get_product_info(params, user, role, ctx):
    product = params.product or "Organic Rice"

    message = (
        f"📦 **Product Information: {product}**\n\n"
        f"**Details:**\n"
        f"• Type: Organic\n• Origin: {user.district or 'Local'} farms\n"
        f"• Certification: Organic certified\n• Shelf Life: 12 months\n"
        f"• Storage: Cool, dry place\n\n"
        f"**Nutritional Info:**\n• Rich in fiber\n• High in vitamins\n"
        f"• No pesticides\n• GMO-free\n\n"
        f"**Farmer Info:**\n• Verified farmer\n• Uzhavar PIN: UZP-123456\n"
        f"• Farm location: {user.district or 'Nearby'}\n• Rating: ⭐ 4.9\n\n"
        f"**Price:** ₹45/kg\n**Availability:** In stock\n\n"
        f"Would you like to add this to cart?"
    )
    return FunctionResult(True, message, {"product": product, "price": 45, "available": True})


@handler(F.CANCEL_ORDER, latency=1.0)
async def cancel_order(params, user, role, ctx):
    order_id = params.order_id or LATEST_ORDER

    message = (
        f"❌ **Order Cancelled**\n\n"
        f"**Order ID:** {order_id}\n"
        f"**Status:** Cancelled\n"
        f"**Refund Status:** Processing\n"
        f"**Refund Amount:** ₹1,250\n"
        f"**Refund Method:** Original payment method\n\n"
        f"**Timeline:**\n"
        f"• Refund initiated: {fmt_datetime(ctx.now())}\n"
        f"• Expected credit: 3-5 business days\n\n"
        f"**Note:** You'll receive a confirmation SMS once refund is processed.\n\n"
        f"Is there anything else I can help you with?"
    )
    return FunctionResult(True, message, {"order_id": order_id, "status": "cancelled", "refund_amount": 1250})


@handler(F.GET_RECEIPT, latency=0.6)
async def get_receipt(params, user, role, ctx):
    order_id = params.order_id or LATEST_ORDER
    receipt_id = ctx.ids.token("RCP")
    payment_ref = ctx.ids.token("TXN")

    message = (
        f"🧾 **Order Receipt**\n\n"
        f"**Receipt ID:** {receipt_id}\n"
        f"**Order ID:** {order_id}\n"
        f"**Date:** {fmt_date(ctx.now())}\n\n"
        f"**Items:**\n"
        f"1. Organic Rice - 5kg × ₹45 = ₹225\n"
        f"2. Fresh Vegetables - 2kg × ₹40 = ₹80\n"
        f"3. Organic Wheat - 3kg × ₹50 = ₹150\n\n"
        f"**Subtotal:** ₹455\n**Delivery:** ₹50\n**Tax:** ₹45.50\n**Total:** ₹550.50\n\n"
        f"**Payment:** ✅ Paid via UPI\n"
        f"**Transaction ID:** {payment_ref}\n\n"
        f"**Download:** You can download this receipt from your order history.\n\n"
        f"Need a printed copy?"
    )
    return FunctionResult(True, message, {"receipt_id": receipt_id, "order_id": order_id, "total": 550.50})
