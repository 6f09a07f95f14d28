from sqlalchemy import Column, Integer, String, ForeignKey
from tourism.core.database import Base

class Visit(Base):
    __tablename__ = "visits"

    id = Column(String, primary_key=True, index=True)  # ex: VIS00001

    # Références vérifiées à l'écriture. Les suppressions de visiteur/site
    # effacent explicitement les visites liées (voir les routeurs).
    visitor_id = Column(String, ForeignKey("visitors.id"), index=True, nullable=False)
    site_id = Column(String, ForeignKey("sites.id"), index=True, nullable=False)

    # Durée en jours (>= 1)
    duration = Column(Integer, nullable=False)
    date_visit = Column(String, nullable=True)
