import logging
from typing import List

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from ..metrics import user_queries, users_returned
from ..schemas import ErrorResponse, ErrorTag, SearchErrorResponse, User
from ..store.evaluator import BadOrderField, evaluate
from ..store.records import RecordStore

logger = logging.getLogger(__name__)


def require_access_token(access_token: str = Header(default="", alias="AccessToken")):
    if not access_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


router = APIRouter(
    prefix="/search",
    tags=["Search"],
    dependencies=[Depends(require_access_token)],
)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


@router.get(
    "/users",
    response_model=List[User],
    summary="Find users by name",
    responses={
        400: {"model": SearchErrorResponse, "description": "Unknown order field"},
        401: {"model": ErrorResponse, "description": "Missing AccessToken header"},
    },
)
def find_users(
    limit: int = Query(..., ge=0),
    offset: int = Query(..., ge=0),
    query: str = "",
    order_field: str = "",
    order_by: int = Query(...),
    store: RecordStore = Depends(get_store),
):
    try:
        users = evaluate(store, query, order_field, order_by, limit, offset)
    except BadOrderField as e:
        logger.info("Rejected order field %r", e.order_field)
        user_queries.labels(outcome="bad_order_field").inc()
        body = SearchErrorResponse(error=ErrorTag.BAD_ORDER_FIELD.value)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )

    user_queries.labels(outcome="ok").inc()
    users_returned.observe(len(users))
    return users
