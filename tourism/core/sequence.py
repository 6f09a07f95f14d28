from sqlalchemy import update
from sqlalchemy.orm import Session

from tourism import models
from tourism.utils import generate_id


def next_id(db: Session, counter_name: str, prefix: str, size: int) -> str:
    """
    Incrémente le compteur `counter_name` et retourne le nouvel identifiant.

    L'UPDATE verrouille la ligne du compteur jusqu'au commit de l'appelant :
    lecture, incrément, persistance et fabrication de l'id forment une seule
    unité atomique. L'appelant doit committer dans la même session.
    """
    result = db.execute(
        update(models.Counter)
        .where(models.Counter.name == counter_name)
        .values(nb=models.Counter.nb + 1)
    )

    if result.rowcount == 0:
        # Compteur absent (base créée hors init_db) : on le crée directement à 1
        db.add(models.Counter(name=counter_name, nb=1))
        db.flush()
        nb = 1
    else:
        nb = db.query(models.Counter.nb).filter(models.Counter.name == counter_name).scalar()

    return generate_id(prefix, nb, size)
