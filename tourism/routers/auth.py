import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tourism.core import database, security
from tourism.core.sequence import next_id
from tourism import schemas, models, oauth2
from tourism.exceptions import InvalidCredentials, NotFound, ServerError

router = APIRouter(prefix="/api", tags=["Users"])
logger = logging.getLogger(__name__)

USER_ID_LENGTH = 5

# --- INSCRIPTION ---
@router.post('/register', status_code=status.HTTP_201_CREATED, response_model=schemas.UserResponse)
def register(user: schemas.UserCreate, db: Session = Depends(database.get_db)):
    try:
        # Hachage avant next_id : le verrou du compteur est tenu jusqu'au commit
        hashed_password = security.get_password_hash(user.password)
        new_user = models.User(
            id=next_id(db, "users", "U", USER_ID_LENGTH),
            username=user.username,
            email=user.email,
            password=hashed_password,
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except Exception as e:
        db.rollback()
        logger.error("Inscription impossible : %s", e, exc_info=True)
        raise ServerError(str(e))

    logger.info("Utilisateur %s inscrit", new_user.id)
    return new_user

# --- CONNEXION ---
@router.post('/login', response_model=schemas.TokenPair)
def login(credentials: schemas.LoginRequest, db: Session = Depends(database.get_db)):
    user = db.query(models.User).filter(models.User.email == credentials.email).first()
    if not user:
        raise NotFound("user not found")

    try:
        valid = security.verify_password(credentials.password, user.password)
    except Exception as e:
        logger.error("Vérification du mot de passe impossible : %s", e, exc_info=True)
        raise ServerError(str(e))

    if not valid:
        raise InvalidCredentials()

    claims = {"username": user.username, "email": user.email}
    return {
        "accessToken": security.create_access_token(claims),
        "refreshToken": security.create_refresh_token(claims),
    }

# --- RENOUVELLEMENT DU TOKEN D'ACCÈS ---
# Le refresh token n'est jamais réémis. L'existence de l'utilisateur n'est pas revérifiée.
@router.post('/refreshToken', response_model=schemas.AccessToken)
def refresh_token(claims: dict = Depends(oauth2.get_refresh_claims)):
    claims = {k: v for k, v in claims.items() if k not in ("exp", "iat")}
    return {"accessToken": security.create_access_token(claims)}
