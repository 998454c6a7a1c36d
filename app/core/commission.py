"""
Affiliate commission rules.

Referrers earn a lifetime revenue share on every payment made by users they referred.
"""

# 30% revenue share
COMMISSION_RATE_PERCENT = 30


def calculate_commission(amount_paid: int) -> int:
    """
    Calculate the referrer commission for a payment.
    
    Args:
        amount_paid: Amount paid in minor currency units (JPY)
        
    Returns:
        floor(amount_paid * 0.30), computed in integer arithmetic
    """
    return (amount_paid * COMMISSION_RATE_PERCENT) // 100
