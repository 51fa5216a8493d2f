"""Internal API endpoints exposing the hashing facade."""

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from hashkit.api.deps import get_hash_manager, require_internal_token
from hashkit.api.schemas import (
    CheckPayload,
    CheckResponse,
    InfoPayload,
    InfoResponse,
    MakePayload,
    MakeResponse,
    NeedsRehashPayload,
    NeedsRehashResponse,
)
from hashkit.core.manager import HashManager
from hashkit.crypto.errors import (
    AlgorithmMismatchError,
    HashingError,
    HashingUnsupportedError,
    MalformedDigestError,
    UnsupportedDriverError,
)

router = APIRouter(prefix="/hashing", tags=["hashing"])

Manager = Annotated[HashManager, Depends(get_hash_manager)]
InternalToken = Annotated[str, Depends(require_internal_token)]

HTTP_BAD_REQUEST = 400
HTTP_CONFLICT = 409
HTTP_UNPROCESSABLE = 422
HTTP_SERVER_ERROR = 500

_ERRORS: dict[type[HashingError], tuple[str, int]] = {
    UnsupportedDriverError: ("unsupported_driver", HTTP_BAD_REQUEST),
    MalformedDigestError: ("malformed_hash", HTTP_UNPROCESSABLE),
    AlgorithmMismatchError: ("algorithm_mismatch", HTTP_CONFLICT),
    HashingUnsupportedError: ("hashing_unsupported", HTTP_SERVER_ERROR),
}


def _error_response(exc: HashingError) -> JSONResponse:
    """Translate a hashing failure into an error body."""
    error, status_code = _ERRORS.get(
        type(exc), ("hashing_error", HTTP_SERVER_ERROR)
    )
    return JSONResponse(
        {"error": error, "error_description": str(exc)},
        status_code=status_code,
    )


@router.post("/make", response_model=None)
def make_hash(
    payload: MakePayload,
    manager: Manager,
    _token: InternalToken,
) -> MakeResponse | JSONResponse:
    """POST /hashing/make -- hash a value."""
    try:
        hashed = manager.driver(payload.driver).make(
            payload.value, payload.options.to_options()
        )
    except HashingError as exc:
        return _error_response(exc)
    return MakeResponse(hash=hashed)


@router.post("/check", response_model=None)
def check_hash(
    payload: CheckPayload,
    manager: Manager,
    _token: InternalToken,
) -> CheckResponse | JSONResponse:
    """POST /hashing/check -- verify a value against a stored hash."""
    try:
        valid = manager.driver(payload.driver).check(
            payload.value, payload.hash, payload.options.to_options()
        )
    except HashingError as exc:
        return _error_response(exc)
    return CheckResponse(valid=valid)


@router.post("/needs-rehash", response_model=None)
def needs_rehash(
    payload: NeedsRehashPayload,
    manager: Manager,
    _token: InternalToken,
) -> NeedsRehashResponse | JSONResponse:
    """POST /hashing/needs-rehash -- compare stored parameters to current ones."""
    try:
        stale = manager.driver(payload.driver).needs_rehash(
            payload.hash, payload.options.to_options()
        )
    except HashingError as exc:
        return _error_response(exc)
    return NeedsRehashResponse(needs_rehash=stale)


@router.post("/info", response_model=None)
def hash_info(
    payload: InfoPayload,
    manager: Manager,
    _token: InternalToken,
) -> InfoResponse | JSONResponse:
    """POST /hashing/info -- describe a stored hash."""
    try:
        info = manager.info(payload.hash)
    except HashingError as exc:
        return _error_response(exc)
    return InfoResponse(
        algo_name=info.algo_name, algo_id=info.algo_id, options=info.options
    )
