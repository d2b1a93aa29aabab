"""
Fundraiser and Donation Pydantic Schemas
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from alumni_hub.schemas.base import CamelModel


class FundraiserStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    UPI = "upi"
    CARD = "card"
    NETBANKING = "netbanking"


class DonationStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class FundraiserCreateRequest(CamelModel):
    """Request schema for creating a fundraiser"""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    goal: float = Field(..., gt=0)
    category: str = "General"
    end_date: Optional[str] = None
    featured: bool = False
    image: Optional[str] = None


class FundraiserResponse(CamelModel):
    """Response schema for a fundraiser"""

    id: str
    title: str
    description: str
    goal: float
    raised: float
    donors: int
    category: str
    end_date: Optional[str]
    featured: bool
    image: Optional[str]
    created_by: str
    created_at: datetime
    status: FundraiserStatus


class DonationRequest(CamelModel):
    """Request schema for donating to a fundraiser"""

    amount: float = Field(..., gt=0)
    payment_method: PaymentMethod
    # Simulated payments settle immediately unless told otherwise
    status: DonationStatus = DonationStatus.COMPLETED


class DonationResponse(CamelModel):
    """Response schema for a donation"""

    id: str
    fundraiser_id: str
    user_id: str
    amount: float
    payment_method: PaymentMethod
    transaction_id: str
    status: DonationStatus
    created_at: datetime
