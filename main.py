"""
Console demo: classify → extract → execute for a batch of sample utterances.

Usage:
    python main.py [farmer|consumer|warehouse|admin]

Runs without latency and with an in-memory store, so nothing is written
to disk.
"""

import json
import sys
import asyncio

from models import UserProfile, ChatMessage, Role
from chatbot_service import ChatbotService
from record_store import InMemoryRecordStore
from providers import no_delay

DEMO_USER = UserProfile(
    id="F1001",
    name="Ravi Kumar",
    role="farmer",
    phone="+91-98765-43210",
    state="Tamil Nadu",
    district="Madurai",
    village="Melur",
    uzhavar_pin="UZP-100100",
    crops=["Rice", "Sugarcane"],
    land_size="3 acres",
    verified=True,
    join_date="2023-06-01",
    total_income=185000,
    monthly_growth=8,
    green_points=420,
)

SAMPLES = {
    Role.FARMER: [
        "pay 500 rupees for seeds",
        "pay",
        "send message: harvest pickup moved to Friday",
        "what's the weather like in Madurai",
        "crop advice for monsoon",
        "what is the market price of wheat",
        "generate qr code for produce batch",
        "record transaction in ledger",
        "am I eligible for pm kisan",
        "tell me about soil",
        "hello there",
    ],
    Role.CONSUMER: [
        "track order ORD12345",
        "search for organic tomatoes",
        "cancel my order #4521",
        "what is my carbon footprint",
        "find farmers near Coimbatore",
    ],
    Role.WAREHOUSE: [
        "check stock",
        "set temperature to 18 and humidity 55",
        "schedule pickup from Melur farm on friday",
        "generate sales report",
    ],
    Role.ADMIN: [
        "pay 1,200 rupees to vendor for equipment",
        "view transactions",
        "system health check",
        "show error logs",
    ],
}


def process(service: ChatbotService, utterance: str, role: Role, history):
    """Run one utterance end to end and print what happened."""
    response = service.send_message(utterance, DEMO_USER, role, history)

    print(f"\n{'━'*70}")
    print(f"💬  \"{utterance}\"")
    print(f"🎯  Type:       {response.type}")
    print(f"📊  Confidence: {response.confidence:.0%}")

    if response.is_function_call:
        print(f"⚙️   Action:     {response.action}")
        print(f"📦  Params:     {json.dumps(response.params, indent=2, default=str)}")
        result = asyncio.run(service.execute_function(response.action, response.params, DEMO_USER, role))
        marker = "✅" if result.success else "❌"
        print(f"{marker}  Result:\n{result.message}")
        reply = result.message
    else:
        print(f"💡  Reply:\n{response.content}")
        reply = response.content

    history.append(ChatMessage(role="user", content=utterance))
    history.append(ChatMessage(role="assistant", content=reply))


if __name__ == "__main__":
    requested = Role.parse(sys.argv[1]) if len(sys.argv) > 1 else Role.FARMER
    if requested is None:
        print(f"Unknown role '{sys.argv[1]}'. Use one of: {', '.join(r.value for r in Role)}")
        sys.exit(1)

    service = ChatbotService(store=InMemoryRecordStore(), delay=no_delay)
    history = []
    for utterance in SAMPLES[requested]:
        process(service, utterance, requested, history)

    print(f"\n{'━'*70}")
    for record_type in ("transactions", "notifications", "ledger", "qrcodes"):
        print(f"🗂️  {record_type}: {len(service.list_records(record_type))} record(s)")
