"""Admin handlers: analytics, users, transactions, health and logs."""

from datetime import timedelta

from models import FunctionName as F, FunctionResult, RecordType
from handlers.registry import handler, fmt_date, fmt_datetime, fmt_time, format_inr, humanize


@handler(F.GET_ANALYTICS, latency=1.2)
async def get_analytics(params, user, role, ctx):
    message = (
        "📊 **System Analytics**\n\n"
        "**Overview (Last 30 Days):**\n\n"
        "**Users:**\n• Total Users: 1,250\n• Active Users: 890 (71%)\n"
        "• New Users: 45 this month\n• Growth: +12% from last month\n\n"
        "**Transactions:**\n• Total Transactions: 3,450\n• Total Revenue: ₹12,50,000\n"
        "• Average Transaction: ₹362\n• Success Rate: 98.5%\n\n"
        "**Products:**\n• Total Products: 2,340\n• Active Listings: 1,890\n"
        "• Orders: 1,560\n• Conversion Rate: 66.7%\n\n"
        "**Performance:**\n• System Uptime: 99.8%\n• Response Time: 120ms avg\n• Error Rate: 0.2%\n\n"
        "**Top Metrics:**\n• Most Active: Farmers (45%)\n• Peak Hours: 10 AM - 2 PM\n"
        "• Popular Feature: Product Search\n\n"
        "Would you like detailed breakdown?"
    )
    return FunctionResult(True, message, {"users": 1250, "transactions": 3450, "revenue": 1250000})


@handler(F.GET_USER_STATS, latency=1.0)
async def get_user_stats(params, user, role, ctx):
    message = (
        "👥 **User Statistics**\n\n"
        "**Total Users:** 1,250\n\n"
        "**By Role:**\n• Farmers: 560 (45%)\n• Consumers: 450 (36%)\n"
        "• Warehouse: 180 (14%)\n• Admin: 60 (5%)\n\n"
        "**Activity:**\n• Active Today: 320 users\n• Active This Week: 890 users\n"
        "• Active This Month: 1,100 users\n\n"
        "**Engagement:**\n• Average Session: 12 minutes\n• Daily Active Users: 320\n"
        "• Weekly Active Users: 890\n• Monthly Active Users: 1,100\n\n"
        "**Growth:**\n• New Users (Today): 5\n• New Users (This Week): 35\n"
        "• New Users (This Month): 45\n• Growth Rate: +12% month-over-month\n\n"
        "**Verification:**\n• Verified Users: 1,180 (94%)\n• Pending: 70 (6%)\n\n"
        "Would you like user details?"
    )
    return FunctionResult(True, message, {"total": 1250, "active": 890, "growth": 12})


@handler(F.VIEW_TRANSACTIONS, latency=1.0)
async def view_transactions(params, user, role, ctx):
    recorded = ctx.store.list(RecordType.TRANSACTIONS)
    recorded_total = sum(int(t.get("amount") or 0) for t in recorded)
    recent = recorded[-5:]

    if recent:
        lines = "\n".join(
            f"• {t.get('id')}: {format_inr(t.get('amount') or 0)} for {humanize(t.get('purpose'))}"
            f" ({t.get('user') or 'unknown'})"
            for t in reversed(recent)
        )
    else:
        lines = "• No payments recorded through the assistant yet"

    message = (
        f"💳 **Transaction Overview**\n\n"
        f"**Recorded via Assistant:**\n"
        f"• Transactions: {len(recorded)}\n"
        f"• Total Amount: {format_inr(recorded_total)}\n\n"
        f"**Latest:**\n{lines}\n\n"
        f"**Last 24 Hours:**\n• Total Transactions: 145\n• Total Amount: ₹52,500\n"
        f"• Success Rate: 98.6%\n• Failed: 2 transactions\n\n"
        f"**Last 7 Days:**\n• Total Transactions: 980\n• Total Amount: ₹3,45,000\n"
        f"• Average: ₹352 per transaction\n• Peak Day: {fmt_date(ctx.days_from_now(-2))}\n\n"
        f"**Last 30 Days:**\n• Total Transactions: 3,450\n• Total Amount: ₹12,50,000\n"
        f"• Growth: +15% from last month\n\n"
        f"**Top Transaction Types:**\n1. Product Purchase: 65%\n2. Service Payment: 25%\n3. Subscription: 10%\n\n"
        f"**Payment Methods:**\n• UPI: 60%\n• Card: 25%\n• Wallet: 15%\n\n"
        f"Would you like detailed transaction list?"
    )
    return FunctionResult(True, message, {
        "recorded": len(recorded),
        "recorded_amount": recorded_total,
        "today": 145,
        "week": 980,
        "month": 3450,
        "total_amount": 1250000,
    })


@handler(F.MANAGE_USERS, latency=0.8)
async def manage_users(params, user, role, ctx):
    message = (
        f"👤 **User Management**\n\n"
        f"**Action:** {humanize(params.action)}\n"
        f"**Status:** ✅ Completed\n\n"
        f"**Available Actions:**\n"
        f"• View user details\n• Edit user information\n• Activate/Deactivate users\n"
        f"• Change user roles\n• View user activity\n• Reset passwords\n• Export user data\n\n"
        f"**Quick Stats:**\n• Total Users: 1,250\n• Active: 1,180\n"
        f"• Inactive: 70\n• Pending Verification: 50\n\n"
        f"**Recent Activity:**\n• 5 new users today\n• 12 users verified today\n"
        f"• 3 users deactivated (inactive)\n\n"
        f"What would you like to manage?"
    )
    return FunctionResult(True, message, {"action": params.action, "total_users": 1250, "active": 1180})


@handler(F.SYSTEM_HEALTH_CHECK, latency=1.5)
async def system_health_check(params, user, role, ctx):
    message = (
        f"🏥 **System Health Check**\n\n"
        f"**Overall Status:** ✅ Healthy\n"
        f"**Uptime:** 99.8%\n"
        f"**Last Check:** {fmt_datetime(ctx.now())}\n\n"
        f"**System Components:**\n\n"
        f"**✅ Database:**\n• Status: Operational\n• Response Time: 45ms\n• Connections: 125/200\n\n"
        f"**✅ API Server:**\n• Status: Operational\n• Response Time: 120ms avg\n"
        f"• CPU Usage: 45%\n• Memory: 2.1GB/4GB\n\n"
        f"**✅ Storage:**\n• Status: Operational\n• Usage: 450GB/1TB (45%)\n• I/O Performance: Excellent\n\n"
        f"**✅ Cache:**\n• Status: Operational\n• Hit Rate: 92%\n• Memory: 512MB\n\n"
        f"**Alerts:**\n• None - All systems normal\n\n"
        f"**Recommendations:**\n• System running optimally\n• No action required\n• Next check: 1 hour\n\n"
        f"All systems are healthy! 🎉"
    )
    return FunctionResult(True, message, {"status": "healthy", "uptime": 99.8, "cpu": 45, "memory": 52.5})


@handler(F.VIEW_LOGS, latency=1.0)
async def view_logs(params, user, role, ctx):
    now = ctx.now()

    def ago(minutes):
        return fmt_time(now - timedelta(minutes=minutes))

    message = (
        f"📋 **System Logs**\n\n"
        f"**Log Type:** {params.log_type}\n"
        f"**Time Range:** Last 24 hours\n\n"
        f"**Summary:**\n• Total Logs: 12,450\n• Errors: 5 (0.04%)\n"
        f"• Warnings: 23 (0.18%)\n• Info: 12,422 (99.78%)\n\n"
        f"**Recent Logs:**\n\n"
        f"[{ago(0)}] INFO: User login successful\n"
        f"[{ago(5)}] INFO: Payment processed\n"
        f"[{ago(10)}] INFO: Order shipped\n"
        f"[{ago(15)}] WARNING: High API response time\n"
        f"[{ago(20)}] INFO: Inventory updated\n\n"
        f"**Error Logs:**\n• 2 failed payment attempts (handled)\n"
        f"• 1 connection timeout (recovered)\n• 2 validation errors (resolved)\n\n"
        f"**Status:** All critical issues resolved\n\n"
        f"Would you like to filter or export logs?"
    )
    return FunctionResult(True, message, {"log_type": params.log_type, "total": 12450, "errors": 5, "warnings": 23})
