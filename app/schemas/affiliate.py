"""
Pydantic schemas for affiliate endpoints.
"""
from pydantic import BaseModel, Field


class AffiliateSummaryResponse(BaseModel):
    """Lifetime earnings and referral count for an affiliate."""
    user_id: int = Field(..., description="Affiliate user ID")
    balance_jpy: int = Field(0, description="Wallet balance in JPY")
    total_referrals: int = Field(0, description="Number of users referred")
    commission_rate_percent: int = Field(..., description="Revenue share on referred payments")
    
    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "balance_jpy": 3600,
                "total_referrals": 3,
                "commission_rate_percent": 30
            }
        }
