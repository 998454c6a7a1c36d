"""
Affiliate service for referral lookup and commission crediting.

Referral edges are read-only here; wallets are only ever credited.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from sqlalchemy.orm import Session

from app.db.models.affiliate_referral import AffiliateReferral
from app.db.models.affiliate_wallet import AffiliateWallet
from app.core.commission import calculate_commission, COMMISSION_RATE_PERCENT

logger = logging.getLogger(__name__)


@dataclass
class CommissionCredit:
    """Result of crediting a referrer for one payment."""
    referrer_id: int
    commission: int
    balance_jpy: int


@dataclass
class AffiliateSummary:
    """Dashboard figures for one affiliate."""
    user_id: int
    balance_jpy: int
    total_referrals: int
    commission_rate_percent: int = COMMISSION_RATE_PERCENT


def get_referrer_id(db: Session, referred_user_id: int) -> Optional[int]:
    """Return the referrer of a user, or None if the user was not referred."""
    referral = db.query(AffiliateReferral).filter(
        AffiliateReferral.referred_user_id == referred_user_id
    ).order_by(AffiliateReferral.id).first()
    
    if not referral:
        return None
    return referral.referrer_id


def credit_wallet(db: Session, user_id: int, amount: int) -> AffiliateWallet:
    """
    Add an amount to a user's wallet, creating the wallet if absent.
    
    Args:
        db: Database session
        user_id: Wallet owner
        amount: JPY to add
        
    Returns:
        The wallet after commit
    """
    wallet = db.query(AffiliateWallet).filter(AffiliateWallet.user_id == user_id).first()
    
    if not wallet:
        wallet = AffiliateWallet(user_id=user_id, balance_jpy=amount)
        db.add(wallet)
    else:
        wallet.balance_jpy = AffiliateWallet.balance_jpy + amount
    
    db.commit()
    db.refresh(wallet)
    
    return wallet


def credit_referrer(db: Session, referred_user_id: int, amount_paid: int) -> Optional[CommissionCredit]:
    """
    Credit the referrer of a paying user with their commission.
    
    Not idempotent: every call credits again.
    
    Args:
        db: Database session
        referred_user_id: The paying user
        amount_paid: Payment amount in JPY
        
    Returns:
        CommissionCredit, or None if the payer has no referrer
    """
    referrer_id = get_referrer_id(db, referred_user_id)
    if referrer_id is None:
        logger.debug(f"No referrer for user_id={referred_user_id}")
        return None
    
    commission = calculate_commission(amount_paid)
    wallet = credit_wallet(db, referrer_id, commission)
    
    logger.info(f"Affiliate {referrer_id} credited with {commission} JPY commission.")
    
    return CommissionCredit(
        referrer_id=referrer_id,
        commission=commission,
        balance_jpy=wallet.balance_jpy,
    )


def get_affiliate_summary(db: Session, user_id: int) -> AffiliateSummary:
    """Balance and referral count for an affiliate. Unknown users get zeros."""
    wallet = db.query(AffiliateWallet).filter(AffiliateWallet.user_id == user_id).first()
    total_referrals = db.query(AffiliateReferral).filter(
        AffiliateReferral.referrer_id == user_id
    ).count()
    
    return AffiliateSummary(
        user_id=user_id,
        balance_jpy=wallet.balance_jpy if wallet else 0,
        total_referrals=total_referrals,
    )
