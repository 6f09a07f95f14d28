from sqlalchemy import Column, String, Float
from tourism.core.database import Base

class Site(Base):
    __tablename__ = "sites"

    id = Column(String, primary_key=True, index=True)  # ex: S0001
    name = Column(String, nullable=False)
    place = Column(String, nullable=True)

    # Tarif par jour (Ariary)
    tarif = Column(Float, nullable=False, default=0)
