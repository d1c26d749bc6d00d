from fastapi import APIRouter, Depends

from marketmoves.api.dependencies import get_aggregator
from marketmoves.schemas.stock import Quote
from marketmoves.services.data_aggregator import DataAggregator

router = APIRouter(prefix="/api", tags=["quote"])


@router.get("/quote", response_model=Quote)
async def get_quote(
    symbol: str = "",
    aggregator: DataAggregator = Depends(get_aggregator),
):
    return await aggregator.get_quote(symbol)
