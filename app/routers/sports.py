from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.crud import sport as crud
from app.schemas.sport import SportCreate, SportUpdate, SportResponse
from app.services.auth import get_current_user, require_admin
from app.models.user import User

router = APIRouter()

DUPLICATE_NAME = "Sport name already exists"


@router.get("/", response_model=List[SportResponse])
def read_sports(
    created_by: Optional[str] = Query(
        None, description="Use 'me' to list only the sports you created"
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if created_by == "me":
        return crud.get_sports(db, created_by=current_user.id)
    return crud.get_sports(db)


@router.post("/", response_model=SportResponse, status_code=status.HTTP_201_CREATED)
def create_sport(
    sport: SportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if crud.get_sport_by_name(db, sport.name):
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)
    try:
        return crud.create_sport(db=db, sport=sport, created_by=current_user.id)
    except IntegrityError:
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)


@router.put("/{sport_id}", response_model=SportResponse)
def update_sport(
    sport_id: int,
    sport: SportUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    existing = crud.get_sport_by_name(db, sport.name)
    if existing and existing.id != sport_id:
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)

    try:
        db_sport = crud.update_sport(db=db, sport_id=sport_id, sport=sport)
    except IntegrityError:
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)
    if db_sport is None:
        raise HTTPException(status_code=404, detail="Sport not found")
    return db_sport
