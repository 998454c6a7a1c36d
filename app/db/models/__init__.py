"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.
"""
from app.db.models.user import User
from app.db.models.subscription import Subscription
from app.db.models.affiliate_referral import AffiliateReferral
from app.db.models.affiliate_wallet import AffiliateWallet

__all__ = [
    "User",
    "Subscription",
    "AffiliateReferral",
    "AffiliateWallet",
]
