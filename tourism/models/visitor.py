from sqlalchemy import Column, String
from tourism.core.database import Base

class Visitor(Base):
    __tablename__ = "visitors"

    id = Column(String, primary_key=True, index=True)  # ex: V0001
    name = Column(String, index=True, nullable=False)
    address = Column(String, nullable=True)
