import asyncio
import logging

import httpx

from marketmoves.analysis.narrative import explain
from marketmoves.api.validation import normalize_ticker
from marketmoves.config import Settings, get_settings
from marketmoves.schemas.stock import AnalysisResult, History, Metrics, NewsItem, Quote
from marketmoves.services.alpha_vantage import AlphaVantageService
from marketmoves.services.news_service import NewsService

logger = logging.getLogger(__name__)


def _discard_outcome(task: asyncio.Future):
    if not task.cancelled() and task.exception() is not None:
        logger.debug(f"Dropped sibling failure: {task.exception()!r}")


class DataAggregator:
    """Fans a ticker out to every provider and merges the normalized records.

    Quote, metrics and history are required: the first one to fail aborts the
    request with that adapter's error. News is optional and never fails.
    """

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = settings or get_settings()
        self.alpha_vantage = AlphaVantageService(settings, transport=transport)
        self.news = NewsService(settings, transport=transport)

    async def get_quote(self, ticker: str) -> Quote:
        ticker = normalize_ticker(ticker)
        return await self.alpha_vantage.fetch_quote(ticker)

    async def get_metrics(self, ticker: str) -> Metrics:
        ticker = normalize_ticker(ticker)
        return await self.alpha_vantage.fetch_metrics(ticker)

    async def get_history(self, ticker: str) -> History:
        ticker = normalize_ticker(ticker)
        return await self.alpha_vantage.fetch_daily_history(ticker)

    async def get_news(self, ticker: str) -> list[NewsItem]:
        ticker = normalize_ticker(ticker)
        return await self.news.fetch_news(ticker)

    async def analyze(self, ticker: str) -> AnalysisResult:
        ticker = normalize_ticker(ticker)
        # Fail before spending any upstream calls
        self.alpha_vantage.ensure_configured()

        tasks = [
            asyncio.ensure_future(self.alpha_vantage.fetch_quote(ticker)),
            asyncio.ensure_future(self.alpha_vantage.fetch_metrics(ticker)),
            asyncio.ensure_future(self.alpha_vantage.fetch_daily_history(ticker)),
            asyncio.ensure_future(self.news.fetch_news(ticker)),
        ]
        try:
            quote, metrics, history, news = await asyncio.gather(*tasks)
        except Exception:
            # First failure wins; siblings finish on their own and their outcome is dropped
            for task in tasks:
                task.add_done_callback(_discard_outcome)
            raise
        logger.info(
            f"Analyzed {ticker}: {len(history.points)} history points, {len(news)} headlines"
        )

        result = AnalysisResult(
            symbol=quote.symbol,
            quote=quote,
            metrics=metrics,
            history=history,
            news=news,
        )
        result.narrative = explain(result)
        return result
