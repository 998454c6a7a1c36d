"""
Stripe webhook signature verification.

Only used when STRIPE_WEBHOOK_SECRET is configured.
"""
import json
import logging
import stripe
from app.core import config

logger = logging.getLogger(__name__)


def verification_enabled() -> bool:
    """Whether inbound webhooks must carry a valid Stripe-Signature."""
    return bool(config.STRIPE_WEBHOOK_SECRET)


def verify_webhook(request_body: bytes, signature: str) -> dict:
    """
    Verify and parse Stripe webhook event.
    
    Args:
        request_body: Raw request body bytes
        signature: Stripe-Signature header value
    
    Returns:
        Parsed event dictionary
    
    Raises:
        ValueError: If webhook verification fails
    """
    if not config.STRIPE_WEBHOOK_SECRET:
        raise ValueError("STRIPE_WEBHOOK_SECRET not configured")
    if not signature:
        logger.error("Webhook rejected: missing Stripe-Signature header")
        raise ValueError("Missing Stripe-Signature header")
    
    try:
        stripe.Webhook.construct_event(
            request_body, signature, config.STRIPE_WEBHOOK_SECRET
        )
    except ValueError as e:
        logger.error(f"Invalid webhook payload: {e}")
        raise ValueError(f"Invalid webhook payload: {e}")
    except stripe.SignatureVerificationError as e:
        logger.error(f"Webhook signature verification failed: {e}")
        raise ValueError(f"Invalid signature: {e}")
    
    # Work on the plain JSON; stripe.Event is not a dict on every SDK version
    event = json.loads(request_body)
    if isinstance(event, dict):
        logger.info(f"Verified webhook event: {event.get('type')}, id={event.get('id')}")
    return event
