import os
import sys
import tempfile
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'app' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the app at a throwaway SQLite file before anything builds the engine
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.gettempdir(), "garment_inventory_test.db")
os.environ["AUTH_REQUIRED"] = "false"

from app.database.connection import Base, engine, SessionLocal
from app import models  # noqa: F401  (registers tables on Base.metadata)


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from empty tables
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cutting_payload():
    """Build a cutting record request body; keyword arguments override defaults."""
    def build(**overrides):
        payload = {
            "product_id": "P-100",
            "fabric_type": "Cotton",
            "fabric_color": "Blue",
            "product_name": "Shirt",
            "pieces_count": 30,
            "piece_length": 1.2,
            "piece_width": 0.8,
            "size_type": "Mixed",
            "size_breakdown": [{"size": "M", "quantity": 10}],
            "cutting_master": "Ravi",
            "tailor_item_per_piece": 25.0,
            "date": "2026-01-15",
            "time": "10:30",
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def order_payload():
    """Build a manufacturing order request body."""
    def build(cutting_id="CUT0001", size="M", quantity=4, **overrides):
        payload = {
            "cutting_id": cutting_id,
            "size": size,
            "quantity": quantity,
            "tailor_name": "Anita",
        }
        payload.update(overrides)
        return payload
    return build
