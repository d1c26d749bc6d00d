from fastapi import APIRouter, Depends

from marketmoves.api.dependencies import get_aggregator
from marketmoves.schemas.stock import AnalysisResult
from marketmoves.services.data_aggregator import DataAggregator

router = APIRouter(prefix="/api", tags=["analysis"])


@router.get("/analysis", response_model=AnalysisResult)
async def get_analysis(
    symbol: str = "",
    aggregator: DataAggregator = Depends(get_aggregator),
):
    """Quote, metrics, history and headlines in one call, plus the narrative."""
    return await aggregator.analyze(symbol)
