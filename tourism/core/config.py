from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # NOM DU PROJET
    PROJECT_NAME: str = "Gestion des visites touristiques"
    VERSION: str = "1.0.0"

    # SECURITE
    # Deux secrets distincts : un pour les tokens d'accès, un pour les refresh tokens.
    # À surcharger via l'environnement ou le fichier .env en production.
    ACCESS_TOKEN_SECRET: str = "remplacez_moi_par_une_cle_d_acces_longue"
    REFRESH_TOKEN_SECRET: str = "remplacez_moi_par_une_cle_de_refresh_longue"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 180
    REFRESH_TOKEN_EXPIRE_DAYS: int = 365

    # BASE DE DONNEES
    # Vide = SQLite local (tourism.db)
    DATABASE_URL: str = ""

    # SERVEUR
    PORT: int = 5000

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
