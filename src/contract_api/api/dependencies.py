import logging

from fastapi import Request

from contract_api.database.interfaces import ContractStore
from contract_api.utils.config_loader import DatabaseConfig

logger = logging.getLogger(__name__)


def build_contract_db(cfg: DatabaseConfig) -> ContractStore:
    """Use the SQLAlchemy repository when a url is configured, else the in-memory stand-in."""
    if cfg.url:
        from contract_api.database.postgres_real import ContractRepository

        return ContractRepository(connection_string=cfg.url, pool_size=cfg.pool_size, max_overflow=cfg.max_overflow)

    from contract_api.database.postgres import InMemoryContractRepository

    logger.info("No database url configured; using in-memory contract store")
    return InMemoryContractRepository()


def get_db(request: Request) -> ContractStore:
    """Dependency for the contract repository"""
    return request.app.state.db
