from typing import Callable, Dict, List

from ..schemas import OrderBy, OrderField, User
from .records import RecordStore

_SORT_KEYS: Dict[OrderField, Callable[[User], object]] = {
    OrderField.ID: lambda user: user.id,
    OrderField.NAME: lambda user: user.name,
    OrderField.DEFAULT: lambda user: user.name,
    OrderField.AGE: lambda user: user.age,
}


class BadOrderField(ValueError):
    def __init__(self, order_field: str):
        super().__init__(f"bad order field: {order_field!r}")
        self.order_field = order_field


def parse_order_field(order_field: str) -> OrderField:
    try:
        return OrderField(order_field)
    except ValueError:
        raise BadOrderField(order_field) from None


def evaluate(
    store: RecordStore,
    query: str,
    order_field: str,
    order_by: int,
    limit: int,
    offset: int,
) -> List[User]:
    """Run one find-users query against the store.

    Records match when ``query`` is empty or a substring of the display name
    (first and last name joined by a space). Sorting is stable and only
    happens for ``OrderBy.ASC`` / ``OrderBy.DESC``; any other code keeps
    store order. ``limit == 0`` returns everything from ``offset`` on.

    Raises BadOrderField before any sorting or slicing when ``order_field``
    is not one of ``OrderField``.
    """
    if limit < 0 or offset < 0:
        raise ValueError("limit and offset must be non-negative")

    result = [
        record.to_user()
        for record in store
        if query == "" or query in record.name
    ]

    field = parse_order_field(order_field)
    direction = OrderBy.from_code(order_by)
    if direction is OrderBy.ASC:
        result.sort(key=_SORT_KEYS[field])
    elif direction is OrderBy.DESC:
        # reverse=True keeps equal keys in their original order
        result.sort(key=_SORT_KEYS[field], reverse=True)

    offset = min(offset, len(result))
    if limit == 0 or offset + limit > len(result):
        limit = len(result) - offset

    return result[offset:offset + limit]
