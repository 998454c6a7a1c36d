from sqlalchemy import Column, Integer, String
from app.db.base import Base

class Subscription(Base):
    """One row per user, replaced wholesale on every successful payment."""
    __tablename__ = "subscriptions"

    user_id = Column(Integer, primary_key=True, autoincrement=False)

    status = Column(String)  # active | inactive
    plan_type = Column(String, nullable=True)
