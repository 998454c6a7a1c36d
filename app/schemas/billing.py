"""
Pydantic schemas for the payment webhook.

Mirrors the subset of the Stripe invoice event the webhook reads.
"""
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class InvoiceMetadata(BaseModel):
    """Metadata attached during checkout session creation."""
    user_id: int = Field(..., alias="userId", description="Paying user ID")
    plan_type: Optional[str] = Field(None, alias="planType", description="Purchased plan identifier")

    class Config:
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def accept_plan_alias(cls, data):
        # Older checkout code wrote "plan" instead of "planType"
        if isinstance(data, dict) and "planType" not in data and "plan" in data:
            data = {**data, "planType": data["plan"]}
        return data


class InvoicePaymentObject(BaseModel):
    """The `data.object` of an invoice.payment_succeeded event."""
    customer_email: Optional[str] = Field(None, description="Payer email")
    amount_paid: int = Field(0, description="Amount paid in JPY")
    metadata: InvoiceMetadata

    class Config:
        json_schema_extra = {
            "example": {
                "customer_email": "nguyen@example.com",
                "amount_paid": 1000,
                "metadata": {"userId": 2, "planType": "candidate_basic"}
            }
        }


class InvoicePaymentData(BaseModel):
    """The `data` envelope of an invoice.payment_succeeded event."""
    invoice: InvoicePaymentObject = Field(..., alias="object")


class WebhookErrorResponse(BaseModel):
    """Error response schema for webhook processing."""
    error: str = Field(..., description="Error message")
    
    class Config:
        json_schema_extra = {
            "example": {
                "error": "Internal processing error"
            }
        }
