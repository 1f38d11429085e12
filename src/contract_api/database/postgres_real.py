"""
SQLAlchemy-backed contract repository, used when DATABASE_URL is set.
Implements the same interface as contract_api.database.postgres (in-memory stand-in).

Writes go through ORM sessions; reads run raw SQL on the same engine.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from sqlalchemy import DateTime, Integer, String, create_engine, text
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from contract_api.database.errors import NotFoundError, StorageError
from contract_api.database.interfaces import ContractStore
from contract_api.database.models import Base, Contract

logger = logging.getLogger(__name__)

_SELECT_CONTRACTS = "SELECT id, name, start_date, end_date FROM contracts"
_RESULT_TYPES = {"id": Integer, "name": String, "start_date": DateTime, "end_date": DateTime}


def _normalize_connection_string(s: str) -> str:
    """Strip common mistakes: 'psql \'...\'', extra quotes, whitespace."""
    s = s.strip()
    if re.match(r"^psql\s+", s, re.IGNORECASE):
        s = re.sub(r"^psql\s+", "", s, flags=re.IGNORECASE).strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s


def _engine_kwargs(connection_string: str, pool_size: int, max_overflow: int) -> Dict[str, Any]:
    url = make_url(connection_string)
    if url.get_backend_name() == "sqlite":
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {"pool_pre_ping": True, "pool_size": pool_size, "max_overflow": max_overflow}


def _row_to_contract(row: Any) -> Contract:
    return Contract(id=row.id, name=row.name, start_date=row.start_date, end_date=row.end_date)


class ContractRepository(ContractStore):
    """
    Contract data access using SQLAlchemy. Every public method opens its own
    session or connection and releases it before returning or raising.
    Driver and SQL failures surface as StorageError.
    """

    def __init__(self, connection_string: str, pool_size: int = 5, max_overflow: int = 10) -> None:
        connection_string = _normalize_connection_string(connection_string)
        self.engine = create_engine(connection_string, **_engine_kwargs(connection_string, pool_size, max_overflow))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def create_tables(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not create tables: {e}") from e

    def ping(self) -> bool:
        try:
            with self._connection() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.warning("Database ping failed: %s", e)
            return False

    @contextmanager
    def _session(self) -> Iterator[Session]:
        s = self.SessionLocal()
        try:
            yield s
            s.commit()
        except SQLAlchemyError as e:
            s.rollback()
            raise StorageError(f"Contract store error: {e}") from e
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        try:
            with self.engine.connect() as conn:
                yield conn
        except SQLAlchemyError as e:
            raise StorageError(f"Contract store error: {e}") from e

    # ------------------------------------------------------------------ #
    # Writes (ORM)
    # ------------------------------------------------------------------ #
    def add_contract(self, record: Contract) -> Contract:
        with self._session() as s:
            s.add(record)
            s.flush()
            s.refresh(record)
        logger.info("Stored contract id=%s", record.id)
        return record

    def update_contract(self, record: Contract) -> Contract:
        with self._session() as s:
            existing = s.get(Contract, record.id)
            if existing is None:
                raise NotFoundError(record.id)
            existing.name = record.name
            existing.start_date = record.start_date
            existing.end_date = record.end_date
            s.flush()
            s.refresh(existing)
        logger.info("Updated contract id=%s", existing.id)
        return existing

    def delete_contract(self, contract_id: int) -> None:
        with self._session() as s:
            existing = s.get(Contract, contract_id)
            if existing is None:
                raise NotFoundError(contract_id)
            s.delete(existing)
        logger.info("Deleted contract id=%s", contract_id)

    # ------------------------------------------------------------------ #
    # Reads (raw SQL)
    # ------------------------------------------------------------------ #
    def get_contract(self, contract_id: int) -> Contract:
        stmt = text(f"{_SELECT_CONTRACTS} WHERE id = :id").columns(**_RESULT_TYPES)
        with self._connection() as conn:
            row = conn.execute(stmt, {"id": contract_id}).one_or_none()
        if row is None:
            raise NotFoundError(contract_id)
        return _row_to_contract(row)

    def list_contracts(self) -> List[Contract]:
        stmt = text(f"{_SELECT_CONTRACTS} ORDER BY id").columns(**_RESULT_TYPES)
        with self._connection() as conn:
            rows = conn.execute(stmt).all()
        return [_row_to_contract(r) for r in rows]
