from fastapi import Depends

from marketmoves.config import Settings, get_settings
from marketmoves.services.data_aggregator import DataAggregator


def get_aggregator(settings: Settings = Depends(get_settings)) -> DataAggregator:
    """One aggregator per request; nothing is shared between requests."""
    return DataAggregator(settings)
