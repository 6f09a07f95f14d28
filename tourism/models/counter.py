from sqlalchemy import Column, Integer, String
from tourism.core.database import Base

class Counter(Base):
    __tablename__ = "counters"

    # Un compteur par type de ressource : users, visitors, sites, visits
    name = Column(String, primary_key=True)

    # Monotone : jamais décrémenté, les ids supprimés ne sont pas réutilisés
    nb = Column(Integer, nullable=False, default=0)
