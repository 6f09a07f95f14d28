import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from tourism.core.config import settings

logger = logging.getLogger(__name__)

# 1. URL de la base. Si rien n'est configuré, on crée une base SQLite locale.
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL.strip()

# 2. Correctif pour les URL PostgreSQL au format Heroku/Render
if SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

if not SQLALCHEMY_DATABASE_URL:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./tourism.db"

# 3. Configuration du moteur
engine_kwargs = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # Base en mémoire : une seule connexion partagée, sinon chaque session voit une base vide
    if SQLALCHEMY_DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Compteurs d'identifiants, un par type de ressource
COUNTER_NAMES = ("users", "visitors", "sites", "visits")


def init_db():
    """Crée les tables et initialise les compteurs manquants à 0."""
    # Import local : les modèles doivent être enregistrés sur Base avant create_all()
    from tourism import models

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        existing = {name for (name,) in db.query(models.Counter.name).all()}
        for name in COUNTER_NAMES:
            if name not in existing:
                db.add(models.Counter(name=name, nb=0))
                logger.info("Compteur '%s' initialisé", name)
        db.commit()
    finally:
        db.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
