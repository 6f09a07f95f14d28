def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "online"


def test_counters_are_seeded(client):
    from tourism import models
    from tourism.core.database import SessionLocal

    db = SessionLocal()
    try:
        counters = {c.name: c.nb for c in db.query(models.Counter).all()}
    finally:
        db.close()
    assert counters == {"users": 0, "visitors": 0, "sites": 0, "visits": 0}
