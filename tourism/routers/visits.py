import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourism.core import database
from tourism.core.sequence import next_id
from tourism import schemas, models, oauth2
from tourism.exceptions import NotFound

router = APIRouter(
    prefix="/api/visits",
    tags=["Visits"],
    dependencies=[Depends(oauth2.get_current_user)],
)
logger = logging.getLogger(__name__)

VISIT_ID_LENGTH = 8


def check_references(db: Session, visitor_id: str, site_id: str):
    """Vérifie que le visiteur et le site référencés existent (404 sinon)."""
    visitor = db.query(models.Visitor).filter(models.Visitor.id == visitor_id).first()
    site = db.query(models.Site).filter(models.Site.id == site_id).first()

    if not visitor and not site:
        raise NotFound("Visitor & site were not found")
    if not site:
        raise NotFound("Site was not found")
    if not visitor:
        raise NotFound("Visitor was not found")


def _get_visit_or_404(db: Session, visit_id: str) -> models.Visit:
    visit = db.query(models.Visit).filter(models.Visit.id == visit_id).first()
    if not visit:
        raise NotFound("Visit not found")
    return visit

# --- 1. LISTE ---
@router.get("", response_model=List[schemas.VisitResponse])
def list_visits(db: Session = Depends(database.get_db)):
    return db.query(models.Visit).all()

# --- 2. DÉTAIL DES VISITEURS D'UN SITE, AVEC MONTANTS ---
@router.get("/sites/{site_id}", response_model=schemas.SiteVisitsReport)
def site_visits(site_id: str, db: Session = Depends(database.get_db)):
    site = db.query(models.Site).filter(models.Site.id == site_id).first()
    if not site:
        raise NotFound("Site was not found")

    rows = db.query(models.Visit, models.Visitor)\
        .outerjoin(models.Visitor, models.Visitor.id == models.Visit.visitor_id)\
        .filter(models.Visit.site_id == site_id)\
        .all()

    total = 0
    data = []
    for visit, visitor in rows:
        amount = site.tarif * visit.duration
        total += amount
        data.append({
            "visitor": schemas.VisitorResponse.model_validate(visitor) if visitor else None,
            "date": visit.date_visit,
            "tarif": site.tarif,
            "duration": visit.duration,
            "amount": amount,
        })

    return {"data": data, "total": total}

# --- 3. DÉTAIL ---
@router.get("/{visit_id}", response_model=schemas.VisitResponse)
def get_visit(visit_id: str, db: Session = Depends(database.get_db)):
    return _get_visit_or_404(db, visit_id)

# --- 4. CRÉATION (références vérifiées avant insertion) ---
@router.post("", status_code=201, response_model=schemas.VisitResponse)
def create_visit(visit: schemas.VisitCreate, db: Session = Depends(database.get_db)):
    check_references(db, visit.visitor_id, visit.site_id)

    new_visit = models.Visit(
        id=next_id(db, "visits", "VIS", VISIT_ID_LENGTH),
        **visit.model_dump(),
    )
    db.add(new_visit)
    db.commit()
    db.refresh(new_visit)
    logger.info("Visite %s créée (visiteur %s, site %s)", new_visit.id, new_visit.visitor_id, new_visit.site_id)
    return new_visit

# --- 5. MISE À JOUR ---
@router.put("/{visit_id}", response_model=schemas.VisitResponse)
def update_visit(visit_id: str, changes: schemas.VisitUpdate, db: Session = Depends(database.get_db)):
    visit = _get_visit_or_404(db, visit_id)
    updates = changes.model_dump(exclude_unset=True, exclude_none=True)

    # Les références (éventuellement nouvelles) doivent toujours exister
    check_references(
        db,
        updates.get("visitor_id", visit.visitor_id),
        updates.get("site_id", visit.site_id),
    )

    for field, value in updates.items():
        setattr(visit, field, value)
    db.commit()
    db.refresh(visit)
    return visit

# --- 6. SUPPRESSION ---
@router.delete("/{visit_id}")
def delete_visit(visit_id: str, db: Session = Depends(database.get_db)):
    visit = _get_visit_or_404(db, visit_id)
    db.delete(visit)
    db.commit()
    return {"message": "success"}
