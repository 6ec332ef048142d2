"""
Split management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.split import Split, SplitContributor
from app.schemas.split import (
    SplitCreate, SplitUpdate, SplitResponse, SplitDetailResponse,
    ContributorCreate, ContributorUpdate, ContributorResponse
)
from app.schemas.settlement import SettlementSummary
from app.services import split_service
from app.services.summary_service import build_settlement_data, build_summary

router = APIRouter(prefix="/splits", tags=["splits"])


def get_split_or_404(split_id: int, db: Session) -> Split:
    """Load a split or fail with 404."""
    split = split_service.get_split(split_id, db)
    if not split:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Split not found"
        )
    return split


def get_contributor_or_404(split: Split, contributor_id: int) -> SplitContributor:
    """Load a contributor of the split or fail with 404."""
    contributor = split_service.get_contributor(split, contributor_id)
    if not contributor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contributor not found"
        )
    return contributor


def bad_request(error: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("", response_model=List[SplitResponse])
async def list_splits(db: Session = Depends(get_db)):
    """List all splits."""
    return split_service.list_splits(db)


@router.post("", response_model=SplitDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_split(split_data: SplitCreate, db: Session = Depends(get_db)):
    """Create a new split."""
    try:
        return split_service.create_split(split_data.name, split_data.currency, db)
    except ValueError as e:
        raise bad_request(e)


@router.get("/{split_id}", response_model=SplitDetailResponse)
async def get_split(split_id: int, db: Session = Depends(get_db)):
    """Get split details with contributors and settlements."""
    return get_split_or_404(split_id, db)


@router.patch("/{split_id}", response_model=SplitDetailResponse)
async def update_split(split_id: int, split_data: SplitUpdate, db: Session = Depends(get_db)):
    """Rename a split or change its currency."""
    split = get_split_or_404(split_id, db)
    try:
        return split_service.update_split(
            split, db, name=split_data.name, currency=split_data.currency
        )
    except ValueError as e:
        raise bad_request(e)


@router.delete("/{split_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_split(split_id: int, db: Session = Depends(get_db)):
    """Delete a split."""
    split = get_split_or_404(split_id, db)
    split_service.delete_split(split, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{split_id}/contributors",
    response_model=ContributorResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_contributor(
    split_id: int,
    contributor_data: ContributorCreate,
    db: Session = Depends(get_db)
):
    """Add a contributor; settlements are recalculated."""
    split = get_split_or_404(split_id, db)
    try:
        return split_service.add_contributor(
            split, contributor_data.name, contributor_data.amount_paid, db
        )
    except ValueError as e:
        raise bad_request(e)


@router.patch("/{split_id}/contributors/{contributor_id}", response_model=ContributorResponse)
async def update_contributor(
    split_id: int,
    contributor_id: int,
    contributor_data: ContributorUpdate,
    db: Session = Depends(get_db)
):
    """Edit a contributor; settlements are recalculated."""
    split = get_split_or_404(split_id, db)
    contributor = get_contributor_or_404(split, contributor_id)
    try:
        return split_service.update_contributor(
            split, contributor, db,
            name=contributor_data.name,
            amount_paid=contributor_data.amount_paid
        )
    except ValueError as e:
        raise bad_request(e)


@router.delete("/{split_id}/contributors/{contributor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_contributor(split_id: int, contributor_id: int, db: Session = Depends(get_db)):
    """Remove a contributor; settlements are recalculated."""
    split = get_split_or_404(split_id, db)
    contributor = get_contributor_or_404(split, contributor_id)
    split_service.remove_contributor(split, contributor, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{split_id}/settlements", response_model=SettlementSummary)
async def get_settlements(split_id: int, db: Session = Depends(get_db)):
    """Get the stored settlements with fair share and balances."""
    split = get_split_or_404(split_id, db)
    return build_settlement_data(split.contributors, split.settlements, split.currency)


@router.get("/{split_id}/summary", response_class=PlainTextResponse)
async def get_summary(split_id: int, db: Session = Depends(get_db)):
    """Get a shareable plain-text summary of the split."""
    split = get_split_or_404(split_id, db)
    return build_summary(split)
