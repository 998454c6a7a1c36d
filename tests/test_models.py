"""
Tests for table definitions and the create-if-absent bootstrap.
"""
import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool

from app.db.init_db import init_db
from app.db.models.user import User


def test_init_db_creates_all_tables():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    
    init_db(bind=engine)
    # Second run is a no-op
    init_db(bind=engine)
    
    tables = set(inspect(engine).get_table_names())
    assert {"users", "affiliate_referrals", "affiliate_wallets", "subscriptions"} <= tables


def test_user_role_must_be_known(db):
    db.add(User(email="admin@example.com", role="admin"))
    
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_user_email_is_unique(db):
    db.add(User(email="dup@example.com", role="candidate"))
    db.commit()
    
    db.add(User(email="dup@example.com", role="recruiter"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_user_timestamps_default(db):
    user = User(email="affiliate@example.com", role="affiliate")
    db.add(user)
    db.commit()
    db.refresh(user)
    
    assert user.created_at is not None
    assert user.updated_at is not None
