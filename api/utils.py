"""Request parsing and response helpers shared by the routers."""
import re
from logging import Logger
from typing import Any, Optional, TypeVar

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from errors import BadRequestError

from .models import ResponseMessage

INVALID_BODY = "invalid request body"

ModelT = TypeVar("ModelT", bound=BaseModel)

DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


async def _decode_body(request: Request, model: type[ModelT], logger: Logger) -> ModelT:
    """
    Decode the JSON request body into ``model``.

    Missing fields take the model defaults; anything that is not a JSON object
    with correctly typed fields is rejected.

    Raises:
        BadRequestError: 400 ``invalid request body``.
    """

    try:
        return model.model_validate_json(await request.body(), strict=True)
    except (ValueError, ValidationError) as exc:
        logger.warning("Undecodable request body", extra={"model": model.__name__})
        raise BadRequestError(INVALID_BODY) from exc


def _parse_id(
        raw: Optional[str],
        logger: Logger,
        missing_detail: str,
        invalid_detail: str,
        invalid_status: int = status.HTTP_400_BAD_REQUEST,
    ) -> int:
    """Parse the ``id`` query parameter.

    Raises:
        BadRequestError: 400 with ``missing_detail`` when the parameter is
            absent or empty, ``invalid_status`` with ``invalid_detail`` when
            it is not an integer written with ASCII digits.
    """

    if not raw:
        logger.warning(missing_detail)
        raise BadRequestError(missing_detail)
    if DECIMAL_ID.fullmatch(raw) is None:
        logger.warning(invalid_detail, extra={"id": raw})
        raise BadRequestError(invalid_detail, status_code=invalid_status)
    return int(raw)


def _respond(
        status_code: int,
        message: str,
        data: Any = None,
        errors: Any = None,
    ) -> JSONResponse:
    """Write the JSON envelope, omitting empty ``data`` and ``errors`` keys."""

    envelope = ResponseMessage(message=message, data=data, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope, exclude_none=True),
    )
