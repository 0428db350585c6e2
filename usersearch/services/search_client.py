"""
Blocking client for the find-users endpoint.

The client asks the server for one record more than the page size; getting
that extra record back is how it knows another page exists, without a
separate count query.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .. import config
from ..errors import (
    BadAccessToken,
    InvalidLimit,
    InvalidOffset,
    OrderFieldInvalid,
    ResultDecodeError,
    SearchServerError,
    SearchTimeout,
    TransportFailure,
    UnexpectedStatus,
    UnknownBadRequest,
)
from ..schemas import ErrorTag, SearchErrorResponse, SearchRequest, SearchResponse, User

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(List[User])


class SearchClient:
    """Find-users client.

    Holds only immutable configuration, so one instance can be shared by
    several threads. Each ``find_users`` call makes at most one request and
    never retries.

    Args:
        url: Full URL of the find-users endpoint.
        access_token: Sent in the ``AccessToken`` header.
        timeout: Per-call transport timeout in seconds.
        http_client: Optional ``httpx.Client`` to send requests through.
            Without one, every call opens and closes its own client.
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        timeout: float = config.DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_env(cls, http_client: Optional[httpx.Client] = None) -> "SearchClient":
        return cls(
            url=config.search_service_url(),
            access_token=config.search_access_token(),
            timeout=config.search_timeout(),
            http_client=http_client,
        )

    def find_users(self, request: SearchRequest) -> SearchResponse:
        """Fetch one page of users.

        Raises a ``SearchError`` subclass for every failure; see
        ``usersearch.errors`` for the categories.
        """
        if request.limit < 0:
            raise InvalidLimit()
        if request.offset < 0:
            raise InvalidOffset()

        limit = min(request.limit, config.MAX_PAGE_SIZE)
        params = {
            "limit": limit + 1,
            "offset": request.offset,
            "query": request.query,
            "order_field": request.order_field,
            "order_by": int(request.order_by),
        }
        headers = {"AccessToken": self.access_token}

        response = self._send(params, headers)
        users = self._classify(response, request)

        if len(users) > limit:
            return SearchResponse(users=users[:limit], next_page=True)
        return SearchResponse(users=users, next_page=False)

    def _send(self, params: dict, headers: dict) -> httpx.Response:
        logger.debug("GET %s limit=%s offset=%s", self.url, params["limit"], params["offset"])
        try:
            if self._http_client is not None:
                return self._http_client.get(
                    self.url, params=params, headers=headers, timeout=self.timeout
                )
            with httpx.Client(timeout=self.timeout) as client:
                return client.get(self.url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            logger.warning("Search call to %s timed out after %ss", self.url, self.timeout)
            raise SearchTimeout(self.timeout) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Search call to %s failed: %s", self.url, e)
            raise TransportFailure() from e

    def _classify(self, response: httpx.Response, request: SearchRequest) -> List[User]:
        code = response.status_code

        if code == httpx.codes.UNAUTHORIZED:
            logger.warning("Search server rejected the access token")
            raise BadAccessToken()

        if code == httpx.codes.BAD_REQUEST:
            try:
                body = SearchErrorResponse.model_validate_json(response.content)
            except ValidationError:
                logger.warning("Search server sent an unreadable 400 body")
                raise UnknownBadRequest() from None
            if body.error == ErrorTag.BAD_ORDER_FIELD.value:
                raise OrderFieldInvalid(request.order_field)
            logger.warning("Search server sent unknown error tag %r", body.error)
            raise UnknownBadRequest(body.error)

        if code == httpx.codes.INTERNAL_SERVER_ERROR:
            logger.warning("Search server fatal error")
            raise SearchServerError()

        if code != httpx.codes.OK:
            logger.warning("Search server answered with status %d", code)
            raise UnexpectedStatus(code)

        try:
            return _users_adapter.validate_json(response.content, strict=True)
        except ValidationError:
            logger.warning("Search server sent an unreadable result body")
            raise ResultDecodeError() from None
