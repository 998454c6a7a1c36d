"""
Affiliate dashboard endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.affiliate import AffiliateSummaryResponse
from app.services.affiliate_service import get_affiliate_summary

router = APIRouter(prefix="/api/affiliates", tags=["Affiliates"])


@router.get("/{user_id}/summary", response_model=AffiliateSummaryResponse)
def affiliate_summary(user_id: int, db: Session = Depends(get_db)):
    """
    Lifetime earnings and referral count for an affiliate.
    
    Users without a wallet or referrals get zeros rather than 404.
    """
    return get_affiliate_summary(db, user_id)
