from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from strategy_payoff.api import health, payoff
from strategy_payoff.core.config import settings
from strategy_payoff.core.log_config import configure_logging

def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Strategy Payoff API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(payoff.router)
    return app

app = create_app()
