import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourism.core import database
from tourism.core.sequence import next_id
from tourism import schemas, models, oauth2
from tourism.exceptions import NotFound

# Toutes les routes visiteurs exigent un token d'accès
router = APIRouter(
    prefix="/api/visitors",
    tags=["Visitors"],
    dependencies=[Depends(oauth2.get_current_user)],
)
logger = logging.getLogger(__name__)

VISITOR_ID_LENGTH = 5


def _get_visitor_or_404(db: Session, visitor_id: str) -> models.Visitor:
    visitor = db.query(models.Visitor).filter(models.Visitor.id == visitor_id).first()
    if not visitor:
        raise NotFound("Visitor was not found")
    return visitor

# --- 1. LISTE (filtre optionnel par nom) ---
@router.get("", response_model=List[schemas.VisitorResponse])
def list_visitors(name: Optional[str] = None, db: Session = Depends(database.get_db)):
    query = db.query(models.Visitor)
    if name is not None:
        query = query.filter(models.Visitor.name == name)
    return query.all()

# --- 2. DÉTAIL ---
@router.get("/{visitor_id}", response_model=schemas.VisitorResponse)
def get_visitor(visitor_id: str, db: Session = Depends(database.get_db)):
    return _get_visitor_or_404(db, visitor_id)

# --- 3. CRÉATION ---
@router.post("", status_code=201, response_model=schemas.VisitorResponse)
def create_visitor(visitor: schemas.VisitorCreate, db: Session = Depends(database.get_db)):
    new_visitor = models.Visitor(
        id=next_id(db, "visitors", "V", VISITOR_ID_LENGTH),
        **visitor.model_dump(),
    )
    db.add(new_visitor)
    db.commit()
    db.refresh(new_visitor)
    logger.info("Visiteur %s créé", new_visitor.id)
    return new_visitor

# --- 4. MISE À JOUR (fusion des champs envoyés) ---
@router.put("/{visitor_id}", response_model=schemas.VisitorResponse)
def update_visitor(visitor_id: str, changes: schemas.VisitorUpdate, db: Session = Depends(database.get_db)):
    visitor = _get_visitor_or_404(db, visitor_id)
    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(visitor, field, value)
    db.commit()
    db.refresh(visitor)
    return visitor

# --- 5. SUPPRESSION (et ses visites) ---
@router.delete("/{visitor_id}")
def delete_visitor(visitor_id: str, db: Session = Depends(database.get_db)):
    visitor = _get_visitor_or_404(db, visitor_id)
    removed = db.query(models.Visit)\
        .filter(models.Visit.visitor_id == visitor_id)\
        .delete(synchronize_session=False)
    db.delete(visitor)
    db.commit()
    logger.info("Visiteur %s supprimé (%d visites supprimées)", visitor_id, removed)
    return {"message": "success"}
