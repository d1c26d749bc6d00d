import logging

import httpx
from pydantic import ValidationError

from marketmoves.config import Settings, get_settings
from marketmoves.schemas.stock import NewsItem

logger = logging.getLogger(__name__)

MAX_NEWS_ITEMS = 5


class NewsService:
    """Headline search on NewsAPI.org. Optional: every failure yields no news."""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = settings or get_settings()
        self.api_key = settings.newsapi_key
        self.base_url = settings.newsapi_base_url
        self.limit = min(settings.news_limit, MAX_NEWS_ITEMS)
        self.timeout = settings.http_timeout
        self.transport = transport
        self.enabled = bool(self.api_key)

    async def _get(self, params: dict) -> dict | None:
        if not self.enabled:
            return None
        params["apiKey"] = self.api_key
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.base_url, params=params)
                if resp.is_success:
                    data = resp.json()
                    return data if isinstance(data, dict) else None
                logger.warning(f"NewsAPI returned {resp.status_code} for q={params.get('q')}")
                return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"NewsAPI error for q={params.get('q')}: {e!r}")
            return None

    async def fetch_news(self, ticker: str) -> list[NewsItem]:
        # Free-text query: results may mention the symbol without being about the company
        data = await self._get({
            "q": ticker,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": self.limit,
        })
        if not data or not isinstance(data.get("articles"), list):
            return []

        items = []
        for a in data["articles"]:
            if not isinstance(a, dict) or not a.get("title") or not a.get("url"):
                continue
            source = a.get("source")
            try:
                items.append(NewsItem(
                    title=a["title"],
                    url=a["url"],
                    source=source.get("name") if isinstance(source, dict) else None,
                    published_at=a.get("publishedAt"),
                ))
            except ValidationError:
                logger.debug(f"Skipping malformed NewsAPI article for {ticker}")
        return items[:self.limit]
