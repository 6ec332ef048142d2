"""
Pydantic schemas for settlement calculation.
"""
from pydantic import BaseModel, Field
from typing import List, Union
from decimal import Decimal


class ContributorIn(BaseModel):
    """Schema for a contributor in a stateless calculation request."""
    name: str
    amount_paid: Union[Decimal, str]  # Checked by the split service


class Transfer(BaseModel):
    """Schema for a single transfer in settlement."""
    from_name: str = Field(serialization_alias="from")
    to_name: str = Field(serialization_alias="to")
    amount: Decimal
    
    model_config = {"from_attributes": True, "populate_by_name": True}


class BalanceResponse(BaseModel):
    """Schema for a contributor's net position (positive = is owed money)."""
    name: str
    net: Decimal
    
    model_config = {"from_attributes": True}


class SettlementSummary(BaseModel):
    """Schema for settlement summary."""
    currency: str
    total_paid: Decimal
    fair_share: Decimal
    participant_count: int
    balances: List[BalanceResponse]
    transfers: List[Transfer]
