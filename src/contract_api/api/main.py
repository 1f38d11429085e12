"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from contract_api.api.contracts_router import api as contracts_api
from contract_api.api.dependencies import build_contract_db
from contract_api.api.middleware import install_fault_interceptor
from contract_api.contracts.validation import outcome_from_request_errors
from contract_api.database.errors import NotFoundError
from contract_api.database.interfaces import ContractStore
from contract_api.utils.config_loader import AppConfig, load_app_config

logger = logging.getLogger(__name__)


def _log_database_target(url: str) -> None:
    """Log sanitized DB target details (no credentials)."""
    if not url:
        logger.info("Database url not set; using in-memory contract store")
        return
    try:
        parsed = urlparse(url)
        logger.info(
            "Database target: scheme=%s host=%s port=%s db=%s",
            parsed.scheme,
            parsed.hostname,
            parsed.port,
            (parsed.path or "").lstrip("/"),
        )
    except ValueError as e:
        logger.warning("Could not parse database url for startup logging: %s", e)


def create_app(config: Optional[AppConfig] = None, db: Optional[ContractStore] = None) -> FastAPI:
    cfg = config or load_app_config()
    contract_db = db if db is not None else build_contract_db(cfg.database)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s...", cfg.api.title)
        _log_database_target(cfg.database.url)
        if cfg.database.create_tables:
            contract_db.create_tables()
            logger.info("Database tables initialized")
        yield
        logger.info("Shutting down %s...", cfg.api.title)

    app = FastAPI(
        title=cfg.api.title,
        description="Create and look up contract records",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.db = contract_db

    install_fault_interceptor(app)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        outcome = outcome_from_request_errors(exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=outcome.to_payload())

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})

    @app.get("/health", tags=["Health"])
    def health_check():
        """Health check including database reachability."""
        return {"status": "healthy", "database": app.state.db.ping(), "timestamp": datetime.now().isoformat()}

    app.include_router(contracts_api, prefix=cfg.api.prefix)
    return app


app_config = load_app_config()
logging.basicConfig(level=getattr(logging, app_config.api.log_level))

app = create_app(app_config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
