from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pawpost.api.schemas.schemas import DogFactList, DogFactResponse
from pawpost.core.database import get_db
from pawpost.core.errors import NotFound, StoreError
from pawpost.models.dogFact import DogFact

router = APIRouter(tags=["Dog facts"])


@router.get("/dog-facts", response_model=DogFactList)
def dog_facts(db: Session = Depends(get_db)):
    try:
        facts = db.query(DogFact).order_by(DogFact.id).all()
    except SQLAlchemyError as exc:
        raise StoreError("could not fetch dog facts", detail="Failed to fetch dog facts") from exc

    if not facts:
        raise NotFound("dog_facts table is empty", detail="No dog facts found")
    return {"facts": [DogFactResponse.model_validate(f) for f in facts]}
