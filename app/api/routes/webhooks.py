"""
Payment provider webhook endpoint.
"""
import json
import logging
from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.billing import WebhookErrorResponse
from app.services import stripe_service
from app.services.billing_service import handle_invoice_payment_succeeded, PAYMENT_SUCCEEDED

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/webhooks", tags=["Webhooks"])


@router.post("/stripe", responses={400: {"model": WebhookErrorResponse}, 500: {"model": WebhookErrorResponse}})
async def stripe_webhook(
    request: Request,
    stripe_signature: str = Header(None),
    db: Session = Depends(get_db),
):
    payload = await request.body()

    # Signature is only checked when a webhook secret is configured
    if stripe_service.verification_enabled():
        try:
            event = stripe_service.verify_webhook(payload, stripe_signature)
        except ValueError:
            return JSONResponse(status_code=400, content={"error": "Webhook verification failed"})
    else:
        try:
            event = json.loads(payload)
        except ValueError:
            logger.warning("Rejected webhook with non-JSON body")
            return JSONResponse(status_code=400, content={"error": "Invalid payload"})

    if not isinstance(event, dict):
        return JSONResponse(status_code=400, content={"error": "Invalid payload"})

    if event.get("type") == PAYMENT_SUCCEEDED:
        try:
            handle_invoice_payment_succeeded(event.get("data"), db)
        except (SQLAlchemyError, ValidationError):
            db.rollback()
            logger.exception("Webhook processing error")
            return JSONResponse(status_code=500, content={"error": "Internal processing error"})

        return {"received": True, "processed": True}

    logger.debug(f"Ignoring webhook event type: {event.get('type')}")
    return {"received": True}
