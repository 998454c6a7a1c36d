"""
Billing service for payment webhook processing.

Handles invoice.payment_succeeded: activates the payer's subscription and
credits the payer's referrer, if any, with their commission.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional
from sqlalchemy.orm import Session

from app.db.models.subscription import Subscription
from app.schemas.billing import InvoicePaymentData
from app.services.affiliate_service import credit_referrer, CommissionCredit

logger = logging.getLogger(__name__)

PAYMENT_SUCCEEDED = "invoice.payment_succeeded"


@dataclass
class PaymentResult:
    """Outcome of a processed payment event."""
    user_id: int
    plan_type: Optional[str]
    credit: Optional[CommissionCredit] = None


def activate_subscription(db: Session, user_id: int, plan_type: Optional[str]) -> Subscription:
    """
    Create or replace the user's subscription as active on the given plan.
    
    The previous row, if any, is overwritten wholesale; no history is kept.
    """
    subscription = db.merge(Subscription(user_id=user_id, status="active", plan_type=plan_type))
    db.commit()
    
    logger.info(f"Subscription activated: user_id={user_id}, plan={plan_type}")
    
    return subscription


def handle_invoice_payment_succeeded(event_data: Dict, db: Session) -> PaymentResult:
    """
    Handle invoice.payment_succeeded webhook event.
    
    Each step commits on its own, so a failure while crediting the referrer
    leaves the subscription active. Duplicate deliveries credit again.
    
    Args:
        event_data: Stripe event data object
        db: Database session
        
    Returns:
        PaymentResult describing what was written
        
    Raises:
        pydantic.ValidationError: If the invoice payload is malformed
        sqlalchemy.exc.SQLAlchemyError: On storage failure
    """
    invoice = InvoicePaymentData.model_validate(event_data).invoice
    user_id = invoice.metadata.user_id
    plan_type = invoice.metadata.plan_type
    
    logger.info(f"Processing payment for User {user_id}: {invoice.amount_paid} JPY")
    
    activate_subscription(db, user_id, plan_type)
    credit = credit_referrer(db, user_id, invoice.amount_paid)
    
    return PaymentResult(user_id=user_id, plan_type=plan_type, credit=credit)
