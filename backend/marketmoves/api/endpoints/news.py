from fastapi import APIRouter, Depends

from marketmoves.api.dependencies import get_aggregator
from marketmoves.schemas.stock import NewsFeed
from marketmoves.services.data_aggregator import DataAggregator

router = APIRouter(prefix="/api", tags=["news"])


@router.get("/news", response_model=NewsFeed)
async def get_news(
    symbol: str = "",
    aggregator: DataAggregator = Depends(get_aggregator),
):
    # get_news() only raises for a blank symbol; provider trouble yields no items
    items = await aggregator.get_news(symbol)
    return NewsFeed(items=items)
