"""
Account API endpoints.

Every failure is turned into a JSON body here; nothing escapes to the
framework's default error handler.
"""

import logging
import traceback
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from api.dependencies import get_account_service_factory, get_settings
from shared.config import Settings
from shared.exceptions import ConfigurationError

from .interfaces import AccountServiceFactory
from .models import DeleteAccountRequest
from .exceptions import (
    IdentityStoreUnavailableError,
    MissingUserIdError,
    SuspiciousEmptyResultError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _failure(status_code: int, error: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, **extra},
    )


@router.post("/delete")
async def delete_account(
    request: Request,
    settings: Settings = Depends(get_settings),
    service_factory: AccountServiceFactory = Depends(get_account_service_factory),
) -> JSONResponse:
    """
    Delete one account's identity and profile.

    Body: {"userId": "<id>"}. Already-absent records count as deleted,
    so repeating a request succeeds.
    """
    raw = await request.body()
    try:
        payload = DeleteAccountRequest.model_validate_json(raw or b"{}")
    except PydanticValidationError:
        return _failure(400, "Invalid request body")

    if not payload.user_id:
        return _failure(400, MissingUserIdError().message)

    try:
        service = service_factory(settings)
        outcome = await service.delete_account(payload.user_id)
    except ConfigurationError as e:
        logger.error(f"Missing env variables: {', '.join(e.missing)}")
        return _failure(500, "Missing configuration")
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return _failure(500, str(e), userId=payload.user_id)

    return JSONResponse(status_code=200, content=outcome.to_response())


@router.post("/sync")
async def sync_accounts(
    dry_run: bool = Query(default=False, description="Classify without applying changes"),
    settings: Settings = Depends(get_settings),
    service_factory: AccountServiceFactory = Depends(get_account_service_factory),
) -> JSONResponse:
    """
    Reconcile the profiles table against Supabase Auth.

    Deletes profiles without an identity and creates profiles for
    identities without one.
    """
    try:
        service = service_factory(settings)
        outcome = await service.reconcile(dry_run=dry_run)
    except ConfigurationError as e:
        return _failure(500, e.message)
    except IdentityStoreUnavailableError as e:
        return _failure(500, e.message)
    except SuspiciousEmptyResultError as e:
        return _failure(
            403,
            e.message,
            authUsers=0,
            dbDocuments=0,
            orphansDeleted=0,
            missingCreated=0,
        )
    except Exception as e:
        logger.exception("SYNC FAILED")
        return _failure(500, str(e), stack=traceback.format_exc())

    return JSONResponse(status_code=200, content=outcome.to_response())
