"""
Pydantic schemas for Split entity.
"""
from pydantic import BaseModel
from typing import List, Optional, Union
from datetime import datetime
from decimal import Decimal
from app.schemas.settlement import Transfer


class SplitCreate(BaseModel):
    """Schema for split creation."""
    name: str
    currency: Optional[str] = None  # Defaults to settings.DEFAULT_CURRENCY


class SplitUpdate(BaseModel):
    """Schema for split update."""
    name: Optional[str] = None
    currency: Optional[str] = None


class ContributorCreate(BaseModel):
    """Schema for adding a contributor to a split."""
    name: str
    amount_paid: Optional[Union[Decimal, str]] = None  # Checked by the split service


class ContributorUpdate(BaseModel):
    """Schema for contributor update."""
    name: Optional[str] = None
    amount_paid: Optional[Union[Decimal, str]] = None  # Checked by the split service


class ContributorResponse(BaseModel):
    """Schema for contributor response."""
    id: int
    name: str
    amount_paid: Decimal
    
    class Config:
        from_attributes = True


class SplitResponse(BaseModel):
    """Schema for split response."""
    id: int
    name: str
    currency: str
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class SplitDetailResponse(SplitResponse):
    """Schema for detailed split response with contributors and settlements."""
    contributors: List[ContributorResponse] = []
    settlements: List[Transfer] = []
