from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


def test_create_assigns_sequential_ids(cutting_payload):
    r1 = client.post("/api/cutting-records/", json=cutting_payload())
    r2 = client.post("/api/cutting-records/", json=cutting_payload())
    assert r1.status_code == 201
    assert r2.status_code == 201
    assert r1.json()["cutting_id"] == "CUT0001"
    assert r2.json()["cutting_id"] == "CUT0002"


def test_create_populates_ledger_and_area(cutting_payload):
    r = client.post("/api/cutting-records/", json=cutting_payload(
        size_breakdown=[{"size": "S", "quantity": 4}, {"size": "M", "quantity": 10}],
    ))
    data = r.json()
    assert data["total_square_meters_used"] == 28.8
    assert data["pieces_remaining"] == 14
    assert data["size_breakdown"] == [
        {"size": "S", "quantity": 4, "original_quantity": 4},
        {"size": "M", "quantity": 10, "original_quantity": 10},
    ]


def test_user_supplied_id_is_kept_and_next_id_skips_it(cutting_payload):
    r = client.post("/api/cutting-records/", json=cutting_payload(cutting_id="CUT0041"))
    assert r.json()["cutting_id"] == "CUT0041"

    r2 = client.get("/api/cutting-records/next-id")
    assert r2.json() == {"next_id": "CUT0042"}


def test_duplicate_id_is_a_conflict(cutting_payload):
    client.post("/api/cutting-records/", json=cutting_payload(cutting_id="CUT0001"))
    r = client.post("/api/cutting-records/", json=cutting_payload(cutting_id="CUT0001"))
    assert r.status_code == 409
    assert "already exists" in r.json()["detail"]


def test_breakdown_exceeding_pieces_is_rejected(cutting_payload):
    r = client.post("/api/cutting-records/", json=cutting_payload(
        pieces_count=5, size_breakdown=[{"size": "M", "quantity": 6}],
    ))
    assert r.status_code == 400
    assert "exceeds pieces count" in r.json()["detail"]


def test_duplicate_sizes_are_rejected(cutting_payload):
    r = client.post("/api/cutting-records/", json=cutting_payload(
        size_breakdown=[{"size": "M", "quantity": 2}, {"size": "M", "quantity": 3}],
    ))
    assert r.status_code == 400


def test_unknown_size_fails_schema_validation(cutting_payload):
    r = client.post("/api/cutting-records/", json=cutting_payload(
        size_breakdown=[{"size": "XXXL", "quantity": 2}],
    ))
    assert r.status_code == 422


def test_list_newest_first(cutting_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.get("/api/cutting-records/")
    assert [rec["cutting_id"] for rec in r.json()] == ["CUT0002", "CUT0001"]


def test_get_missing_record_returns_404():
    r = client.get("/api/cutting-records/CUT9999")
    assert r.status_code == 404


def test_update_recalculates_area(cutting_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.put("/api/cutting-records/CUT0001", json={"pieces_count": 40, "notes": "recut"})
    assert r.status_code == 200
    data = r.json()
    assert data["pieces_count"] == 40
    assert data["notes"] == "recut"
    assert data["total_square_meters_used"] == 38.4
    # the ledger is untouched by edits
    assert data["size_breakdown"] == [{"size": "M", "quantity": 10, "original_quantity": 10}]


def test_update_cannot_shrink_below_breakdown(cutting_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.put("/api/cutting-records/CUT0001", json={"pieces_count": 9})
    assert r.status_code == 400


def test_delete_record(cutting_payload):
    client.post("/api/cutting-records/", json=cutting_payload())
    r = client.delete("/api/cutting-records/CUT0001")
    assert r.status_code == 200
    assert client.get("/api/cutting-records/CUT0001").status_code == 404
    assert client.delete("/api/cutting-records/CUT0001").status_code == 404
