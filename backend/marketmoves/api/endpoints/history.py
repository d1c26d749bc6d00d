from fastapi import APIRouter, Depends

from marketmoves.api.dependencies import get_aggregator
from marketmoves.schemas.stock import History
from marketmoves.services.data_aggregator import DataAggregator

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/history", response_model=History)
async def get_history(
    symbol: str = "",
    aggregator: DataAggregator = Depends(get_aggregator),
):
    return await aggregator.get_history(symbol)
