from sqlalchemy import Column, String
from tourism.core.database import Base

class User(Base):
    __tablename__ = "users"

    # --- IDENTITÉ ---
    # Identifiant lisible généré par le compteur "users" (ex: U0001)
    id = Column(String, primary_key=True, index=True)
    username = Column(String, nullable=False)

    # Unique en pratique, mais pas imposé par la base
    email = Column(String, index=True, nullable=False)

    # Hash bcrypt (le sel est inclus dans le hash). Jamais renvoyé par l'API.
    password = Column(String, nullable=False)
