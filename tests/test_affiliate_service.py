"""
Unit tests for affiliate service.
Tests referral lookup, wallet crediting, and dashboard summary.
"""
from app.db.models.affiliate_referral import AffiliateReferral
from app.db.models.affiliate_wallet import AffiliateWallet
from app.services.affiliate_service import (
    get_referrer_id,
    credit_wallet,
    credit_referrer,
    get_affiliate_summary,
)


def test_get_referrer_id_without_referral(db):
    assert get_referrer_id(db, 42) is None


def test_get_referrer_id_returns_first_edge(db):
    db.add(AffiliateReferral(referrer_id=1, referred_user_id=2))
    db.add(AffiliateReferral(referrer_id=7, referred_user_id=2))
    db.commit()
    
    assert get_referrer_id(db, 2) == 1


def test_credit_wallet_creates_wallet(db):
    wallet = credit_wallet(db, 1, 300)
    
    assert wallet.user_id == 1
    assert wallet.balance_jpy == 300
    assert db.query(AffiliateWallet).count() == 1


def test_credit_wallet_increments_existing_balance(db):
    db.add(AffiliateWallet(user_id=1, balance_jpy=500))
    db.commit()
    
    wallet = credit_wallet(db, 1, 300)
    
    assert wallet.balance_jpy == 800
    assert db.query(AffiliateWallet).count() == 1


def test_credit_referrer_without_referral_writes_nothing(db):
    assert credit_referrer(db, 2, 1000) is None
    assert db.query(AffiliateWallet).count() == 0


def test_credit_referrer_credits_commission(db):
    db.add(AffiliateReferral(referrer_id=1, referred_user_id=2))
    db.commit()
    
    credit = credit_referrer(db, 2, 1000)
    
    assert credit.referrer_id == 1
    assert credit.commission == 300
    assert credit.balance_jpy == 300


def test_affiliate_summary(db):
    db.add(AffiliateReferral(referrer_id=1, referred_user_id=2))
    db.add(AffiliateReferral(referrer_id=1, referred_user_id=3))
    db.add(AffiliateReferral(referrer_id=9, referred_user_id=4))
    db.add(AffiliateWallet(user_id=1, balance_jpy=3600))
    db.commit()
    
    summary = get_affiliate_summary(db, 1)
    
    assert summary.balance_jpy == 3600
    assert summary.total_referrals == 2
    assert summary.commission_rate_percent == 30


def test_affiliate_summary_unknown_user(db):
    summary = get_affiliate_summary(db, 123)
    
    assert summary.balance_jpy == 0
    assert summary.total_referrals == 0
