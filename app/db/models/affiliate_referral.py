"""
AffiliateReferral model: a directed edge from a referring user to a referred user.

Edges are created at signup time by the referral flow; the billing webhook only reads them.
"""
from sqlalchemy import Column, Integer
from app.db.base import Base


class AffiliateReferral(Base):
    __tablename__ = "affiliate_referrals"

    # Surrogate key; also fixes which edge wins when a user has several
    id = Column(Integer, primary_key=True, autoincrement=True)
    referrer_id = Column(Integer, index=True)
    referred_user_id = Column(Integer, index=True)

    def __repr__(self):
        return f"<AffiliateReferral(referrer_id={self.referrer_id}, referred_user_id={self.referred_user_id})>"
