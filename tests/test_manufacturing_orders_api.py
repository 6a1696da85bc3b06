from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


def ledger_of(cutting_id):
    record = client.get(f"/api/cutting-records/{cutting_id}").json()
    return [(entry["size"], entry["quantity"]) for entry in record["size_breakdown"]]


def test_scenario_a_over_allocation_is_rejected(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload(size_breakdown=[{"size": "M", "quantity": 10}]))

    r1 = client.post("/api/manufacturing-orders/", json=order_payload(quantity=4))
    assert r1.status_code == 201
    assert ledger_of("CUT0001") == [("M", 6)]

    r2 = client.post("/api/manufacturing-orders/", json=order_payload(quantity=7))
    assert r2.status_code == 400
    body = r2.json()
    assert body["size"] == "M"
    assert body["requested"] == 7
    assert body["available"] == 6
    assert ledger_of("CUT0001") == [("M", 6)]


def test_order_defaults_come_from_cutting_record(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.post("/api/manufacturing-orders/", json=order_payload(quantity=4))
    data = r.json()
    assert data["manufacturing_id"] == "MFG0001"
    assert data["status"] == "Pending"
    assert data["product_name"] == "Shirt"
    assert data["fabric_type"] == "Cotton"
    assert data["fabric_color"] == "Blue"
    assert data["price_per_piece"] == 25.0
    assert data["total_amount"] == 100.0
    assert data["date_of_receive"]


def test_manufacturing_ids_are_sequential(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    ids = [client.post("/api/manufacturing-orders/", json=order_payload(quantity=1)).json()["manufacturing_id"]
           for _ in range(3)]
    assert ids == ["MFG0001", "MFG0002", "MFG0003"]
    assert client.get("/api/manufacturing-orders/next-id").json() == {"next_id": "MFG0004"}


def test_unknown_cutting_record_returns_404(order_payload):
    r = client.post("/api/manufacturing-orders/", json=order_payload(cutting_id="CUT0404"))
    assert r.status_code == 404


def test_size_not_in_breakdown_is_rejected(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.post("/api/manufacturing-orders/", json=order_payload(size="XL", quantity=1))
    assert r.status_code == 400
    assert r.json()["available"] == 0


def test_zero_quantity_is_rejected(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.post("/api/manufacturing-orders/", json=order_payload(quantity=0))
    assert r.status_code == 400
    assert ledger_of("CUT0001") == [("M", 10)]


def test_duplicate_manufacturing_id_rolls_back_reservation(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    client.post("/api/manufacturing-orders/", json=order_payload(quantity=2, manufacturing_id="MFG0001"))

    r = client.post("/api/manufacturing-orders/", json=order_payload(quantity=3, manufacturing_id="MFG0001"))
    assert r.status_code == 409
    assert ledger_of("CUT0001") == [("M", 8)]


def test_available_sizes_match_ledger(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload(
        size_breakdown=[{"size": "S", "quantity": 5}, {"size": "M", "quantity": 10}, {"size": "L", "quantity": 3}],
    ))
    client.post("/api/manufacturing-orders/", json=order_payload(size="M", quantity=4))
    client.post("/api/manufacturing-orders/", json=order_payload(size="M", quantity=6))
    client.post("/api/manufacturing-orders/", json=order_payload(size="S", quantity=2))
    client.post("/api/manufacturing-orders/", json=order_payload(size="L", quantity=9))  # rejected

    available = client.get("/api/cutting-records/CUT0001/available-sizes").json()
    assert available == [
        {"size": "S", "original_quantity": 5, "allocated": 2, "remaining_quantity": 3},
        {"size": "M", "original_quantity": 10, "allocated": 10, "remaining_quantity": 0},
        {"size": "L", "original_quantity": 3, "allocated": 0, "remaining_quantity": 3},
    ]
    derived = [(entry["size"], entry["remaining_quantity"]) for entry in available]
    assert derived == ledger_of("CUT0001")


def test_list_filters(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    client.post("/api/cutting-records/", json=cutting_payload(size_breakdown=[{"size": "L", "quantity": 5}]))
    client.post("/api/manufacturing-orders/", json=order_payload(quantity=1))
    client.post("/api/manufacturing-orders/", json=order_payload(cutting_id="CUT0002", size="L", quantity=1))

    r = client.get("/api/manufacturing-orders/", params={"cutting_id": "CUT0002"})
    assert [o["manufacturing_id"] for o in r.json()] == ["MFG0002"]

    client.put("/api/manufacturing-orders/MFG0001/status", json={"status": "deleted"})
    assert [o["manufacturing_id"] for o in client.get("/api/manufacturing-orders/").json()] == ["MFG0002"]

    r_all = client.get("/api/manufacturing-orders/", params={"include_deleted": True})
    assert len(r_all.json()) == 2
    r_deleted = client.get("/api/manufacturing-orders/", params={"status": "deleted"})
    assert [o["manufacturing_id"] for o in r_deleted.json()] == ["MFG0001"]


def test_update_fields_and_total_price(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    client.post("/api/manufacturing-orders/", json=order_payload(quantity=4))

    r = client.put("/api/manufacturing-orders/MFG0001", json={"items_received": 3, "tailor_name": "Meena"})
    assert r.status_code == 200
    data = r.json()
    assert data["tailor_name"] == "Meena"
    assert data["items_received"] == 3
    assert data["total_price"] == 75.0
    assert data["status"] == "Pending"


def test_update_missing_order_returns_404():
    r = client.put("/api/manufacturing-orders/MFG0404", json={"notes": "x"})
    assert r.status_code == 404


def test_get_does_not_change_state(cutting_payload, order_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    client.post("/api/manufacturing-orders/", json=order_payload(quantity=4))

    first = client.get("/api/manufacturing-orders/MFG0001").json()
    second = client.get("/api/manufacturing-orders/MFG0001").json()
    assert first == second
    assert client.get("/api/qr-products/").json() == []
