"""Identity Resolver — API key header → Identity, or UnauthorizedError.

Invariants:
    - Every resource endpoint depends on resolve_identity (no selective opt-out)
    - Failure short-circuits before the dispatcher or engine is touched
    - The key value is never logged or echoed back
    - Identity is resolved per request and never cached
    - A credential store failure is an EngineFailureError (500), never its cause
"""

import logging

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from taskhub.api.dependencies import get_credential_validator
from taskhub.config import get_settings
from taskhub.core.domain_types import Identity
from taskhub.core.engine_protocols import CredentialValidator
from taskhub.core.errors import (
    EngineError, EngineFailureError, ErrorContext, UnauthorizedError,
)

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(
    name=get_settings().api_key_header, auto_error=False,
)


async def resolve_identity(
    request: Request,
    api_key: str | None = Security(api_key_header),
    validator: CredentialValidator = Depends(get_credential_validator),
) -> Identity:
    """FastAPI dependency: authenticated caller for this request."""
    if not api_key or not api_key.strip():
        _reject(request, "missing")
    try:
        identity = await validator.validate(api_key)
    except EngineError as e:
        raise EngineFailureError(e, ErrorContext(debug_info={
            "stage": "authentication", "path": request.url.path,
        })) from e
    if identity is None:
        _reject(request, "invalid")
    return identity


def _reject(request: Request, reason: str) -> None:
    logger.warning(
        f"Rejected request: {reason} API key",
        extra={"path": request.url.path, "error_code": "UNAUTHORIZED"},
    )
    raise UnauthorizedError(reason)
