"""Request body validation dependencies for FastAPI."""

import logging

from fastapi import Request

from .exceptions import BodyValidationException
from .service import validate_body

logger = logging.getLogger(__name__)


def validated_body[T](model: type[T]):
    """Dependency factory that checks a request body against its field rules.

    FastAPI parses the body into ``model`` first; the returned dependency then
    runs the field rules and rejects the request with 422 when any fail.

    Usage:
        @router.post("/signup")
        async def signup(body: SignupRequest = Depends(validated_body(SignupRequest))):
            ...
    """

    async def body_checker(request: Request, body: model) -> T:  # type: ignore[valid-type]
        errors = validate_body(body)
        if errors:
            logger.info(f"Rejected {model.__name__} body on {request.url.path}: {len(errors)} violations")
            raise BodyValidationException(errors)
        return body

    return body_checker
