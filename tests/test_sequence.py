from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from tourism import models
from tourism.core.database import Base
from tourism.core.sequence import next_id
from tourism.utils import generate_id

WORKERS = 8
INSERTS_PER_WORKER = 10


@pytest.fixture
def file_session_factory(tmp_path):
    """Base SQLite sur fichier : chaque session a sa propre connexion."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'sequence.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = factory()
    db.add(models.Counter(name="visitors", nb=0))
    db.commit()
    db.close()

    yield factory
    engine.dispose()


def test_next_id_increments_counter(file_session_factory):
    db = file_session_factory()
    try:
        assert next_id(db, "visitors", "V", 5) == "V0001"
        assert next_id(db, "visitors", "V", 5) == "V0002"
        db.commit()
        assert db.query(models.Counter.nb).filter(models.Counter.name == "visitors").scalar() == 2
    finally:
        db.close()


def test_next_id_creates_missing_counter(file_session_factory):
    db = file_session_factory()
    try:
        assert next_id(db, "visits", "VIS", 8) == "VIS00001"
    finally:
        db.close()


def test_concurrent_ids_are_unique(file_session_factory):
    def worker(n):
        for i in range(INSERTS_PER_WORKER):
            db = file_session_factory()
            try:
                visitor_id = next_id(db, "visitors", "V", 5)
                db.add(models.Visitor(id=visitor_id, name=f"visiteur-{n}-{i}"))
                db.commit()
            finally:
                db.close()

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        # list() fait remonter les exceptions des threads
        list(pool.map(worker, range(WORKERS)))

    total = WORKERS * INSERTS_PER_WORKER
    db = file_session_factory()
    try:
        ids = [v.id for v in db.query(models.Visitor).all()]
        nb = db.query(models.Counter.nb).filter(models.Counter.name == "visitors").scalar()
    finally:
        db.close()

    assert len(ids) == total
    assert set(ids) == {generate_id("V", n, 5) for n in range(1, total + 1)}
    assert nb == total
