import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from tourism.core import database
from tourism.core.sequence import next_id
from tourism import schemas, models, oauth2
from tourism.exceptions import NotFound

# Lecture publique (héritage de la première version), écriture protégée
router = APIRouter(prefix="/api/sites", tags=["Sites"])
logger = logging.getLogger(__name__)

SITE_ID_LENGTH = 5


def _get_site_or_404(db: Session, site_id: str) -> models.Site:
    site = db.query(models.Site).filter(models.Site.id == site_id).first()
    if not site:
        raise NotFound("Site was not found")
    return site

# --- 1. LISTE ---
@router.get("", response_model=List[schemas.SiteResponse])
def list_sites(db: Session = Depends(database.get_db)):
    return db.query(models.Site).all()

# --- 2. RAPPORT : MONTANT TOTAL ET NOMBRE DE VISITES PAR SITE ---
# Déclaré avant /{site_id} pour ne pas être capturé comme un id
@router.get("/all", response_model=List[schemas.SiteReport],
            dependencies=[Depends(oauth2.get_current_user)])
def sites_report(db: Session = Depends(database.get_db)):
    # total = somme(tarif x durée) ; les sites sans visite sortent à 0
    rows = db.query(
        models.Site,
        func.count(models.Visit.id),
        func.coalesce(func.sum(models.Site.tarif * models.Visit.duration), 0),
    )\
        .outerjoin(models.Visit, models.Visit.site_id == models.Site.id)\
        .group_by(models.Site.id)\
        .all()

    return [
        {"id": site.id, "name": site.name, "nbVisits": nb_visits, "total": total}
        for site, nb_visits, total in rows
    ]

# --- 3. DÉTAIL ---
@router.get("/{site_id}", response_model=schemas.SiteResponse)
def get_site(site_id: str, db: Session = Depends(database.get_db)):
    return _get_site_or_404(db, site_id)

# --- 4. CRÉATION ---
@router.post("", status_code=201, response_model=schemas.SiteResponse,
             dependencies=[Depends(oauth2.get_current_user)])
def create_site(site: schemas.SiteCreate, db: Session = Depends(database.get_db)):
    new_site = models.Site(
        id=next_id(db, "sites", "S", SITE_ID_LENGTH),
        **site.model_dump(),
    )
    db.add(new_site)
    db.commit()
    db.refresh(new_site)
    logger.info("Site %s créé", new_site.id)
    return new_site

# --- 5. MISE À JOUR ---
@router.put("/{site_id}", response_model=schemas.SiteResponse,
            dependencies=[Depends(oauth2.get_current_user)])
def update_site(site_id: str, changes: schemas.SiteUpdate, db: Session = Depends(database.get_db)):
    site = _get_site_or_404(db, site_id)
    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(site, field, value)
    db.commit()
    db.refresh(site)
    return site

# --- 6. SUPPRESSION (et ses visites) ---
@router.delete("/{site_id}", dependencies=[Depends(oauth2.get_current_user)])
def delete_site(site_id: str, db: Session = Depends(database.get_db)):
    site = _get_site_or_404(db, site_id)
    removed = db.query(models.Visit)\
        .filter(models.Visit.site_id == site_id)\
        .delete(synchronize_session=False)
    db.delete(site)
    db.commit()
    logger.info("Site %s supprimé (%d visites supprimées)", site_id, removed)
    return {"message": "success"}
