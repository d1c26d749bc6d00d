"""API request validation utilities."""
from marketmoves.exceptions import InputError


def normalize_ticker(ticker: str | None) -> str:
    """Validate and normalize ticker symbol.

    Args:
        ticker: Raw ticker string from request

    Returns:
        Normalized ticker (uppercase, stripped). Whether the symbol exists is
        left to the upstream providers.

    Raises:
        InputError: If ticker is missing or blank
    """
    if not ticker or not ticker.strip():
        raise InputError("Missing symbol")

    return ticker.strip().upper()
