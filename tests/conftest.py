import httpx
import pytest

from marketmoves.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "alpha_vantage_api_key": "av-test-key",
        "newsapi_key": "news-test-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def quote_payload(symbol="ABC", price="105.0000", previous_close="100.0000", volume="1234567"):
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "02. open": "101.0000",
            "05. price": price,
            "06. volume": volume,
            "07. latest trading day": "2024-06-28",
            "08. previous close": previous_close,
            "09. change": "5.0000",
            "10. change percent": "5.0000%",
        }
    }


def overview_payload(**fields):
    data = {
        "Symbol": "ABC",
        "MarketCapitalization": "2500000000",
        "PERatio": "30.5",
        "DividendYield": "0.0125",
        "52WeekHigh": "120.00",
        "52WeekLow": "80.00",
    }
    data.update(fields)
    return data


def daily_payload(dates, close=lambda i: f"{100 + i}.0000"):
    return {
        "Meta Data": {"2. Symbol": "ABC"},
        "Time Series (Daily)": {
            d: {"1. open": "1.0", "4. close": close(i), "5. adjusted close": "1.0"}
            for i, d in enumerate(dates)
        },
    }


def news_payload(count=2):
    return {
        "status": "ok",
        "totalResults": count,
        "articles": [
            {
                "source": {"id": None, "name": f"Wire {i}"},
                "title": f"Headline {i}",
                "url": f"https://news.example.com/{i}",
                "publishedAt": f"2024-06-28T1{i % 10}:00:00Z",
            }
            for i in range(count)
        ],
    }


class FakeUpstream:
    """Routes mocked requests by Alpha Vantage function name, or "news" for NewsAPI.

    A route maps to a JSON-able body, an httpx.Response, or an exception to raise.
    """

    def __init__(self, **routes):
        self.routes = {
            "GLOBAL_QUOTE": quote_payload(),
            "OVERVIEW": overview_payload(),
            "TIME_SERIES_DAILY_ADJUSTED": daily_payload(["2024-06-26", "2024-06-27", "2024-06-28"]),
            "news": news_payload(),
        }
        self.routes.update(routes)
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handle)

    def calls_to(self, route: str) -> list[httpx.Request]:
        return [r for r in self.requests if self._route_of(r) == route]

    @staticmethod
    def _route_of(request: httpx.Request) -> str:
        if request.url.host == "newsapi.org":
            return "news"
        return request.url.params.get("function", "")

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes[self._route_of(request)]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def upstream():
    return FakeUpstream()
