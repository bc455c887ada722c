"""Request-scoped Dependencies — engine, credential validator, dispatcher.

Invariants:
    - Built fresh per request from the request's DB session (no cross-request state)
    - Tests swap collaborators with app.dependency_overrides, never by patching modules
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.config import get_settings
from taskhub.core.engine_protocols import CredentialValidator, Engine
from taskhub.infrastructure.credential_validator import DatabaseCredentialValidator
from taskhub.infrastructure.database import get_db
from taskhub.infrastructure.sql_engine import SqlEngine
from taskhub.services.dispatcher import OperationDispatcher


async def get_engine(db: AsyncSession = Depends(get_db)) -> Engine:
    return SqlEngine(db)


async def get_credential_validator(
    db: AsyncSession = Depends(get_db),
) -> CredentialValidator:
    return DatabaseCredentialValidator(
        db, max_length=get_settings().api_key_max_length,
    )


async def get_dispatcher(
    engine: Engine = Depends(get_engine),
) -> OperationDispatcher:
    return OperationDispatcher(engine)
