from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Browser client speaks camelCase; attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Quote(CamelModel):
    symbol: str
    price: float = 0
    change: float = 0
    change_percent: float = 0
    volume: int | None = None
    previous_close: float | None = None


class Metrics(CamelModel):
    market_cap: float | None = None
    pe_ratio: float | None = None
    dividend_yield: float | None = None  # fraction, e.g. 0.0051
    fifty_two_week_high: float | None = None
    fifty_two_week_low: float | None = None


class HistoryPoint(CamelModel):
    date: str  # "2024-12-31"
    close: float


class History(CamelModel):
    points: list[HistoryPoint] = []  # oldest first


class NewsItem(CamelModel):
    title: str
    url: str
    source: str | None = None
    published_at: str | None = None


class NewsFeed(CamelModel):
    items: list[NewsItem] = []


class AnalysisResult(CamelModel):
    symbol: str
    quote: Quote | None = None
    metrics: Metrics | None = None
    history: History = History()
    news: list[NewsItem] = []
    narrative: str = ""
