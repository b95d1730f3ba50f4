from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from errors import InvalidPayloadError
from settings import StatusPolicy
from Users.usecase import UserUsecase
from Users.user import User

from .deps import get_status_policy, get_user_usecase
from .utils import INVALID_BODY, _decode_body, _parse_id, _respond

import logging
logger = logging.getLogger(__name__)


# mount api router
user_router = APIRouter()

@user_router.post("")
async def store_new_user(
    request: Request,
    usecase: UserUsecase = Depends(get_user_usecase),
    policy: StatusPolicy = Depends(get_status_policy),
) -> JSONResponse:
    '''Add a User if its email is not already registered.'''

    user = await _decode_body(request, User, logger)
    try:
        created = usecase.create_user(user)
    except InvalidPayloadError as exc:
        logger.info("User validation failed", extra={"http.status.code": policy.user_invalid_body})
        return _respond(policy.user_invalid_body, INVALID_BODY, data=exc.data, errors=exc.errors)

    return _respond(status.HTTP_201_CREATED, "Success add User", data=created)

@user_router.get("")
async def get_users(
    id: Optional[str] = None,
    usecase: UserUsecase = Depends(get_user_usecase),
    policy: StatusPolicy = Depends(get_status_policy),
) -> JSONResponse:
    '''List every user, or fetch one when ``id`` is given.'''

    if id is None:
        return _respond(policy.user_list, "Success get all user", data=usecase.list_users())

    user_id = _parse_id(id, logger, "User ID is required", "Invalid user ID")
    return _respond(status.HTTP_200_OK, "Success get user by id", data=usecase.get_user(user_id))

@user_router.put("")
async def update_user(
    request: Request,
    usecase: UserUsecase = Depends(get_user_usecase),
    policy: StatusPolicy = Depends(get_status_policy),
) -> JSONResponse:

    user = await _decode_body(request, User, logger)
    updated = usecase.update_user(user)
    return _respond(policy.user_update, "Success Update User", data=updated)

@user_router.delete("")
async def delete_user(
    id: Optional[str] = None,
    usecase: UserUsecase = Depends(get_user_usecase),
    policy: StatusPolicy = Depends(get_status_policy),
) -> JSONResponse:

    user_id = _parse_id(
        id,
        logger,
        "Invalid request payload",
        "Invalid id parameter",
        invalid_status=policy.user_invalid_id,
    )
    usecase.delete_user(user_id)
    return _respond(policy.user_delete, "Success delete the user")
