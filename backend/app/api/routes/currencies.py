"""
Currency routes.
"""
from fastapi import APIRouter
from app.core.currency import CURRENCY_SYMBOLS

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("")
async def list_currencies():
    """List the currencies a split can be displayed in."""
    return [{"code": code, "symbol": symbol} for code, symbol in CURRENCY_SYMBOLS.items()]
