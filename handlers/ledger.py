"""
Handlers with durable side effects: payments, notifications, ledger
entries and QR codes. Each one appends exactly one record to the store.
"""

from models import (
    FunctionName as F, FunctionResult, RecordType,
    TransactionRecord, NotificationRecord, LedgerEntryRecord, QRCodeRecord,
)
from handlers.registry import handler, fmt_datetime, format_inr, humanize


@handler(F.CREATE_PAYMENT, latency=1.5)
async def create_payment(params, user, role, ctx):
    now = ctx.now()
    txn = TransactionRecord(
        id=ctx.ids.token("TXN"),
        user_id=user.id,
        requester_id=params.requester_id,
        amount=params.amount_inr,
        purpose=params.purpose,
        timestamp=now.isoformat(),
        user=user.name,
        recipient=params.recipient,
    )
    ctx.store.append(RecordType.TRANSACTIONS, txn)

    to_line = f" to {params.recipient}" if params.recipient else ""
    return FunctionResult(
        success=True,
        message=(
            f"✅ Payment of {format_inr(txn.amount)}{to_line} for {humanize(txn.purpose)} "
            f"has been processed successfully.\n\n"
            f"Transaction ID: {txn.id}\n"
            f"Time: {fmt_datetime(now)}\n\n"
            f"Your payment has been recorded in the ledger."
        ),
        data={
            "transaction_id": txn.id,
            "amount": txn.amount,
            "purpose": txn.purpose,
            "timestamp": txn.timestamp,
            "status": txn.status,
        },
    )


@handler(F.SEND_NOTIFICATION, latency=0.8)
async def send_notification(params, user, role, ctx):
    note = NotificationRecord(
        id=ctx.ids.token("NOTIF"),
        user_id=user.id,
        recipient_id=params.recipient_id or params.requester_id,
        message=params.message.strip(),
        timestamp=ctx.now().isoformat(),
    )
    ctx.store.append(RecordType.NOTIFICATIONS, note)

    recipient = params.recipient_id or user.name or "user"
    return FunctionResult(
        success=True,
        message=(
            f"✅ Notification sent successfully to {recipient}.\n\n"
            f"Message: \"{note.message}\"\n\n"
            f"Notification ID: {note.id}"
        ),
        data={"notification_id": note.id, "message": note.message},
    )


@handler(F.UPDATE_LEDGER, latency=1.0)
async def update_ledger(params, user, role, ctx):
    entry = LedgerEntryRecord(
        id=ctx.ids.ledger_hash(),
        user_id=user.id,
        requester_id=params.requester_id,
        entry_type=params.entry_type,
        block_number=ctx.ids.block_number(),
        timestamp=ctx.now().isoformat(),
        data=dict(params.data),
    )
    ctx.store.append(RecordType.LEDGER, entry)

    return FunctionResult(
        success=True,
        message=(
            f"✅ Ledger updated successfully!\n\n"
            f"Block Hash: {entry.id}\n"
            f"Block Number: {entry.block_number}\n"
            f"Type: {entry.entry_type}\n\n"
            f"This entry has been permanently recorded on the blockchain."
        ),
        data={"hash": entry.id, "block_number": entry.block_number, "type": entry.entry_type},
    )


@handler(F.GENERATE_QR, latency=0.8)
async def generate_qr(params, user, role, ctx):
    owner = user.uzhavar_pin or user.id or "USER"
    code = QRCodeRecord(
        id=ctx.ids.token(f"{owner}-"),
        user_id=user.id,
        data_type=params.data_type,
        timestamp=ctx.now().isoformat(),
        user=user.name,
    )
    ctx.store.append(RecordType.QRCODES, code)

    return FunctionResult(
        success=True,
        message=(
            f"✅ QR Code generated successfully!\n\n"
            f"**QR Code:** {code.id}\n"
            f"**Type:** {code.data_type}\n"
            f"**User:** {user.name or 'N/A'}\n\n"
            f"This QR code can be used for digital identity verification and product tracking."
        ),
        data={"qr_code": code.id, "data_type": code.data_type, "user_id": user.id},
    )
