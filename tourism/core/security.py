from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from tourism.core.config import settings

# Configuration du hachage (bcrypt, sel aléatoire inclus dans le hash)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bcrypt ignore tout ce qui dépasse 72 octets
BCRYPT_MAX_LENGTH = 72


def _truncate(password: str) -> str:
    return password.encode("utf-8")[:BCRYPT_MAX_LENGTH].decode("utf-8", "ignore")


def get_password_hash(password: str) -> str:
    """
    Crypte le mot de passe.
    """
    return pwd_context.hash(_truncate(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Vérifie si le mot de passe correspond au hash.
    """
    return pwd_context.verify(_truncate(plain_password), hashed_password)


def _create_token(claims: Dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=settings.ALGORITHM)


def create_access_token(claims: Dict[str, Any], expires_delta: timedelta = None) -> str:
    """
    Génère le token d'accès (courte durée, 180 s par défaut).
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    return _create_token(claims, settings.ACCESS_TOKEN_SECRET, expires_delta)


def create_refresh_token(claims: Dict[str, Any], expires_delta: timedelta = None) -> str:
    """
    Génère le refresh token (longue durée, 1 an par défaut).
    Il sert uniquement à obtenir de nouveaux tokens d'accès.
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _create_token(claims, settings.REFRESH_TOKEN_SECRET, expires_delta)


def decode_access_token(token: str) -> Dict[str, Any]:
    # Lève JWTError (signature invalide, token expiré, format incorrect)
    return jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])


def decode_refresh_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, settings.REFRESH_TOKEN_SECRET, algorithms=[settings.ALGORITHM])
