"""
Stateless settlement calculation routes.
"""
from fastapi import APIRouter, HTTPException, status
from typing import List
from app.core.config import settings
from app.schemas.settlement import ContributorIn, SettlementSummary
from app.services.settlement_service import Contributor, compute_settlements
from app.services.split_service import validate_amount, validate_contributor_name
from app.services.summary_service import build_settlement_data

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.post("/calculate", response_model=SettlementSummary)
async def calculate_settlements(contributors: List[ContributorIn]):
    """Calculate settlements for an ad-hoc contributor list without storing anything."""
    validated = []
    try:
        for item in contributors:
            name = validate_contributor_name(item.name, [c.name for c in validated])
            validated.append(Contributor(name=name, amount_paid=validate_amount(item.amount_paid)))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    transfers = compute_settlements(validated)
    return build_settlement_data(validated, transfers, settings.DEFAULT_CURRENCY)
