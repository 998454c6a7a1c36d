"""
Seed an affiliate, a referred candidate, and the referral edge between them.
Run: python -m scripts.seed_demo_data
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal
from app.db.init_db import init_db
from app.db.models.user import User
from app.db.models.affiliate_referral import AffiliateReferral
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def get_or_create_user(db, email: str, role: str) -> User:
    """Find a user by email or create one with the given role."""
    user = db.query(User).filter(User.email == email.lower()).first()
    if user:
        logger.info(f"Found existing user: {email} (ID: {user.id})")
        return user
    
    user = User(email=email.lower(), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created {role} user {email} with ID: {user.id}")
    return user


def seed(affiliate_email: str, candidate_email: str):
    """Create both users and link them with a referral edge."""
    init_db()
    db = SessionLocal()
    try:
        affiliate = get_or_create_user(db, affiliate_email, "affiliate")
        candidate = get_or_create_user(db, candidate_email, "candidate")
        
        edge = db.query(AffiliateReferral).filter(
            AffiliateReferral.referrer_id == affiliate.id,
            AffiliateReferral.referred_user_id == candidate.id
        ).first()
        if not edge:
            db.add(AffiliateReferral(referrer_id=affiliate.id, referred_user_id=candidate.id))
            db.commit()
            logger.info(f"Linked referral: {affiliate.id} -> {candidate.id}")
        
        return affiliate.id, candidate.id
    except Exception:
        db.rollback()
        logger.error("Seeding failed", exc_info=True)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    affiliate_id, candidate_id = seed("affiliate@example.com", "candidate@example.com")
    
    print(f"\n[SUCCESS] Affiliate {affiliate_id} now refers candidate {candidate_id}.")
    print("   Try: curl -X POST localhost:3000/api/webhooks/stripe -H 'Content-Type: application/json' \\")
    print(f"        -d '{{\"type\":\"invoice.payment_succeeded\",\"data\":{{\"object\":{{\"amount_paid\":1000,"
          f"\"metadata\":{{\"userId\":{candidate_id},\"planType\":\"candidate_basic\"}}}}}}}}'")
