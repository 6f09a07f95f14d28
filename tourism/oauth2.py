import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from tourism.core import security
from tourism.exceptions import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)

# auto_error=False : on renvoie nous-mêmes 401 quand l'en-tête manque
bearer_scheme = HTTPBearer(auto_error=False)


def _extract_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return credentials.credentials


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """
    Garde des routes protégées : valide le token d'accès du header
    `Authorization: Bearer <token>`.

    - pas de token -> 401
    - token invalide, expiré ou falsifié -> 403

    Les claims décodés sont retournés et attachés à `request.state.user`.
    """
    token = _extract_token(credentials)
    try:
        claims = security.decode_access_token(token)
    except JWTError as e:
        logger.info("Token d'accès rejeté : %s", e)
        raise Forbidden()

    request.state.user = claims
    return claims


def get_refresh_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """Valide un refresh token. Absent ou invalide -> 401."""
    token = _extract_token(credentials)
    try:
        return security.decode_refresh_token(token)
    except JWTError as e:
        logger.info("Refresh token rejeté : %s", e)
        raise Unauthenticated()
