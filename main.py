import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tourism.core import database
from tourism.core.config import settings
from tourism.routers import auth, visitors, sites, visits

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- 1. INITIALISATION DE LA BASE ---
# Crée les tables et les compteurs d'identifiants s'ils n'existent pas
database.init_db()
logger.info("Base de données prête : %s", database.engine.url)

# --- 2. CONFIGURATION DE L'API ---
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="RestFul Api pour la gestion des visites touristiques",
    version=settings.VERSION,
)

# --- 3. CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- 4. ERREURS DE STOCKAGE ---
# Toute erreur SQLAlchemy non traitée devient un 500 avec le message brut
@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Erreur de stockage sur %s %s : %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})

# Filet final : toute autre erreur inattendue renvoie aussi le message brut en JSON
@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.error("Erreur inattendue sur %s %s : %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})

# --- 5. INCLUSION DES ROUTEURS ---
app.include_router(auth.router)
app.include_router(visitors.router)
app.include_router(sites.router)
app.include_router(visits.router)

# --- 6. TEST DE SANTÉ ---
@app.get("/")
def health_check():
    return {
        "status": "online",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
    }

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
