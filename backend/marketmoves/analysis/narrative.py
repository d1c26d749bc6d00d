"""
Templated "why is it moving?" explanation.

Rules run in order; each one contributes a sentence only when its
precondition holds. The direction sentence always runs once a quote exists.
"""
from decimal import ROUND_HALF_UP, Decimal

from marketmoves.schemas.stock import AnalysisResult

EMPTY_PROMPT = "Enter a ticker to see analysis."
ELEVATED_PE = 25
HEADLINES_SENTENCE = "Recent headlines may be influencing the move."


def _fixed(value: float, places: int) -> str:
    """Format with ties rounded away from zero, as the browser client does."""
    return str(Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _direction(result: AnalysisResult) -> str:
    quote = result.quote
    direction = "up" if quote.change >= 0 else "down"
    return f"`{quote.symbol}` is {direction} {_fixed(abs(quote.change_percent), 2)}% today."


def _valuation(result: AnalysisResult) -> str | None:
    pe = result.metrics.pe_ratio if result.metrics else None
    if not pe:
        return None
    qualifier = ", elevated versus market" if pe > ELEVATED_PE else ""
    return f"P/E is {_fixed(pe, 2)}{qualifier}."


def _range_position(result: AnalysisResult) -> str | None:
    metrics = result.metrics
    if not metrics or not metrics.fifty_two_week_high or not metrics.fifty_two_week_low:
        return None
    if not result.quote.price:
        return None
    spread = metrics.fifty_two_week_high - metrics.fifty_two_week_low
    position = (result.quote.price - metrics.fifty_two_week_low) / (spread or 1)
    return f"Price is at {_fixed(position * 100, 0)}% of its 52-week range."


def _headlines(result: AnalysisResult) -> str | None:
    return HEADLINES_SENTENCE if result.news else None


RULES = (_direction, _valuation, _range_position, _headlines)


def explain(result: AnalysisResult) -> str:
    if result.quote is None:
        return EMPTY_PROMPT
    sentences = [s for s in (rule(result) for rule in RULES) if s]
    return "\n".join(sentences)
