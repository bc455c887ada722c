"""Credential Validator — resolves API keys against the api_keys table.

Invariants:
    - Malformed keys (blank, whitespace, too long) are rejected without a query
    - Keys are compared by SHA-256 digest, never in plaintext
    - Revoked keys and keys whose member no longer exists never resolve
    - Read-only: validation mutates nothing
    - A failed lookup raises StorageError, never a raw SQLAlchemy exception
"""

import hashlib
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import Identity, MemberId
from taskhub.infrastructure.database import map_sqlalchemy_error
from taskhub.models.api_key import ApiKey
from taskhub.models.member import Member as MemberModel

logger = logging.getLogger(__name__)


def hash_api_key(api_key: str) -> str:
    """Hex digest stored in api_keys.key_hash."""
    return hashlib.sha256(api_key.encode("utf-8")).hexdigest()


def is_well_formed(api_key: str | None, max_length: int) -> bool:
    if not api_key or len(api_key) > max_length:
        return False
    return not any(ch.isspace() for ch in api_key)


class DatabaseCredentialValidator:
    """CredentialValidator backed by the api_keys and members tables."""

    def __init__(self, db: AsyncSession, max_length: int = 256):
        self._db = db
        self._max_length = max_length

    async def validate(self, api_key: str) -> Identity | None:
        if not is_well_formed(api_key, self._max_length):
            return None
        stmt = (
            select(ApiKey.member_id)
            .join(MemberModel, MemberModel.id == ApiKey.member_id)
            .where(
                ApiKey.key_hash == hash_api_key(api_key),
                ApiKey.revoked_at.is_(None),
            )
        )
        try:
            result = await self._db.execute(stmt)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"API key lookup failed: {e}")
            raise map_sqlalchemy_error(e) from e
        member_id = result.scalar_one_or_none()
        if member_id is None:
            return None
        return Identity(member_id=MemberId(member_id))
