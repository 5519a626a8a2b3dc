"""
Pytest configuration and fixtures for greenledger-chat tests.

Provides sample users for each role, an in-memory record store, a pinned
clock (mid-July, so the current season is monsoon) and a no-op delay so
handler latency never slows the suite down.
"""

import os
import tempfile

# Before any project import reads settings
os.environ.setdefault("SIMULATE_LATENCY", "false")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "greenledger-test-logs"))

from datetime import datetime, timezone

import pytest

from models import UserProfile
from record_store import InMemoryRecordStore
from providers import IdGenerator, no_delay
from chatbot_service import ChatbotService

FIXED_NOW = datetime(2024, 7, 15, 10, 30, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def ids():
    return IdGenerator(fixed_clock)


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def farmer_user():
    return UserProfile(
        id="F1001",
        name="Ravi Kumar",
        role="farmer",
        phone="+91-98765-43210",
        state="Tamil Nadu",
        district="Madurai",
        uzhavar_pin="UZP-100100",
        crops=["Rice", "Sugarcane"],
        land_size="3 acres",
        verified=True,
        total_income=185000,
        green_points=420,
    )


@pytest.fixture
def consumer_user():
    return UserProfile(
        id="C2002",
        name="Meena S",
        role="consumer",
        district="Coimbatore",
        address="12 Gandhi Road, Coimbatore",
    )


@pytest.fixture
def warehouse_user():
    return UserProfile(id="W3003", name="Hub Operator", role="warehouse", district="Madurai")


@pytest.fixture
def admin_user():
    return UserProfile(id="A4004", name="Platform Admin", role="admin")


@pytest.fixture
def service(memory_store):
    """ChatbotService wired to the in-memory store, pinned clock and no delay."""
    return ChatbotService(
        store=memory_store,
        clock=fixed_clock,
        id_generator=IdGenerator(fixed_clock),
        delay=no_delay,
    )
