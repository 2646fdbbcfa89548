from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from app.database import get_db
from app.schemas.report import (
    StatsResponse,
    SportPopularityResponse,
    SessionsByDateResponse,
)
from app.services.auth import get_current_user, require_admin
from app.services.session_queries import SessionQueryService
from app.models.user import User

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    start_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SessionQueryService(db).stats(start_date=start_date, end_date=end_date)


@router.get("/sport-popularity", response_model=List[SportPopularityResponse])
def get_sport_popularity(
    start_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return SessionQueryService(db).sport_popularity(
        start_date=start_date, end_date=end_date
    )


@router.get("/sessions-by-date", response_model=List[SessionsByDateResponse])
def get_sessions_by_date(
    start_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return SessionQueryService(db).sessions_by_date(
        start_date=start_date, end_date=end_date
    )
