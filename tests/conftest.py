"""Pytest fixtures for contract API tests."""

import pytest
from fastapi.testclient import TestClient

from contract_api.api.main import create_app
from contract_api.database.postgres import InMemoryContractRepository
from contract_api.database.postgres_real import ContractRepository
from contract_api.utils.config_loader import AppConfig


@pytest.fixture
def db():
    """In-memory contract repository for tests."""
    return InMemoryContractRepository()


@pytest.fixture
def sql_db(tmp_path):
    """SQLAlchemy repository on a throwaway SQLite file."""
    repo = ContractRepository(f"sqlite:///{tmp_path / 'contracts.db'}")
    repo.create_tables()
    yield repo
    repo.engine.dispose()


@pytest.fixture
def client(db):
    return TestClient(create_app(AppConfig(), db=db))
