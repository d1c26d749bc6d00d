"""
Alpha Vantage client for the required data: quote, company overview
and daily price history.

Every call is a single GET with no retries. Failures surface as
UpstreamError so the aggregator can fail the whole request.
"""
import logging
import math

import httpx

from marketmoves.config import Settings, get_settings
from marketmoves.exceptions import ConfigError, UpstreamError, UpstreamErrorKind
from marketmoves.schemas.stock import History, HistoryPoint, Metrics, Quote

logger = logging.getLogger(__name__)

# Alpha Vantage answers 200 with one of these keys when it refuses a call
_NOTICE_KEYS = ("Note", "Information", "Error Message")


def _to_float(value) -> float | None:
    """Parse an upstream numeric string; placeholders like "None" or "-" become None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _to_int(value) -> int | None:
    number = _to_float(value)
    return int(number) if number is not None else None


class AlphaVantageService:
    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = settings or get_settings()
        self.api_key = settings.alpha_vantage_api_key
        self.base_url = settings.alpha_vantage_base_url
        self.output_size = settings.history_output_size
        self.history_limit = settings.history_limit
        self.timeout = settings.http_timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self):
        if not self.is_configured:
            raise ConfigError("Missing ALPHA_VANTAGE_API_KEY")

    async def _get(self, function: str, ticker: str, label: str, **params) -> dict:
        self.ensure_configured()
        error_message = f"Alpha Vantage {label} error"
        query = {"function": function, "symbol": ticker, **params, "apikey": self.api_key}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.base_url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Alpha Vantage {function} request failed for {ticker}: {e!r}")
            raise UpstreamError(UpstreamErrorKind.TRANSPORT_FAILURE, error_message) from e

        if not resp.is_success:
            logger.warning(f"Alpha Vantage {function} returned {resp.status_code} for {ticker}")
            raise UpstreamError(UpstreamErrorKind.TRANSPORT_FAILURE, error_message)

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning(f"Alpha Vantage {function} sent a non-JSON body for {ticker}")
            raise UpstreamError(UpstreamErrorKind.MALFORMED_RESPONSE, error_message) from e

        if not isinstance(data, dict):
            logger.warning(f"Alpha Vantage {function} sent {type(data).__name__} instead of an object for {ticker}")
            raise UpstreamError(UpstreamErrorKind.MALFORMED_RESPONSE, error_message)

        for key in _NOTICE_KEYS:
            if key in data:
                logger.warning(f"Alpha Vantage {function} notice for {ticker}: {data[key]}")
        return data

    async def fetch_quote(self, ticker: str) -> Quote:
        data = await self._get("GLOBAL_QUOTE", ticker, "quote")
        q = data.get("Global Quote")
        if not isinstance(q, dict):
            raise UpstreamError(UpstreamErrorKind.MALFORMED_RESPONSE, "Alpha Vantage quote error")

        price = _to_float(q.get("05. price")) or 0.0
        prev = _to_float(q.get("08. previous close")) or 0.0
        change = price - prev
        change_pct = (change / prev) * 100 if prev else 0.0

        symbol = q.get("01. symbol")
        if not isinstance(symbol, str) or not symbol.strip():
            symbol = ticker

        return Quote(
            symbol=symbol.strip(),
            price=price,
            change=change,
            change_percent=change_pct,
            volume=_to_int(q.get("06. volume")) or None,
            previous_close=prev or None,
        )

    async def fetch_metrics(self, ticker: str) -> Metrics:
        d = await self._get("OVERVIEW", ticker, "metrics")
        return Metrics(
            market_cap=_to_float(d.get("MarketCapitalization")),
            pe_ratio=_to_float(d.get("PERatio")),
            dividend_yield=_to_float(d.get("DividendYield")),
            fifty_two_week_high=_to_float(d.get("52WeekHigh")),
            fifty_two_week_low=_to_float(d.get("52WeekLow")),
        )

    async def fetch_daily_history(self, ticker: str) -> History:
        d = await self._get("TIME_SERIES_DAILY_ADJUSTED", ticker, "history", outputsize=self.output_size)
        series = d.get("Time Series (Daily)", {})
        if not isinstance(series, dict):
            raise UpstreamError(UpstreamErrorKind.MALFORMED_RESPONSE, "Alpha Vantage history error")

        points = []
        for date, ohlc in series.items():
            close = _to_float(ohlc.get("4. close")) if isinstance(ohlc, dict) else None
            if close is None:
                logger.debug(f"Skipping {ticker} {date}: no usable close")
                continue
            points.append(HistoryPoint(date=date, close=close))

        # ISO dates sort correctly as plain strings
        points.sort(key=lambda p: p.date)
        return History(points=points[-self.history_limit:] if self.history_limit > 0 else [])
