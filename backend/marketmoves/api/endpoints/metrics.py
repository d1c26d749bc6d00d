from fastapi import APIRouter, Depends

from marketmoves.api.dependencies import get_aggregator
from marketmoves.schemas.stock import Metrics
from marketmoves.services.data_aggregator import DataAggregator

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics", response_model=Metrics)
async def get_metrics(
    symbol: str = "",
    aggregator: DataAggregator = Depends(get_aggregator),
):
    return await aggregator.get_metrics(symbol)
