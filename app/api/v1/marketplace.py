from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services import stats_service, offer_service
from app.schemas.stats import StatsResponse
from app.schemas.offer import ActivityItem

router = APIRouter()

@router.get("/stats", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)):
    """Marketplace-wide counters."""
    return stats_service.get_marketplace_stats(db)

@router.get("/activity", response_model=List[ActivityItem])
def get_recent_activity(db: Session = Depends(get_db)):
    """Recent marketplace activity, newest first."""
    return offer_service.get_recent_activity(db)
