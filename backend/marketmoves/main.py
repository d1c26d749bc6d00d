import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketmoves.api.endpoints import analysis, history, metrics, news, quote
from marketmoves.config import get_settings
from marketmoves.exceptions import register_exception_handlers

settings = get_settings()

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="MarketMoves API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(quote.router)
app.include_router(metrics.router)
app.include_router(history.router)
app.include_router(news.router)
app.include_router(analysis.router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "MarketMoves"}
