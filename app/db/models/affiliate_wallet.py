from sqlalchemy import Column, Integer
from app.db.base import Base


class AffiliateWallet(Base):
    """Running commission balance per user, in JPY."""
    __tablename__ = "affiliate_wallets"

    user_id = Column(Integer, primary_key=True, autoincrement=False)
    balance_jpy = Column(Integer, default=0, server_default="0", nullable=False)

    def __repr__(self):
        return f"<AffiliateWallet(user_id={self.user_id}, balance_jpy={self.balance_jpy})>"
