import re
from collections.abc import Callable
from typing import Any

from course_studio.application.course_repo import CourseFilter

OPERATORS: dict[str, Callable[[str, Any], dict[str, Any]]] = {
    "eq": lambda field, value: {field: value},
    "ge": lambda field, value: {field: {"$gte": value}},
    "le": lambda field, value: {field: {"$lte": value}},
    "between": lambda field, value: {
        field: {
            "$gte": value[0],
            "$lte": value[1],
        },
    },
    "contains": lambda field, value: {
        field: re.compile(re.escape(value), re.IGNORECASE),
    },
}

SEARCH_FIELDS = ("title", "description")


def build_course_filter(course_filter: CourseFilter) -> dict[str, Any]:
    """
    Преобразует CourseFilter в MongoDB filter

    Примеры:
    - CourseFilter(status=PUBLISHED) -> {"status": "published"}
    - CourseFilter(price_min=10, price_max=50)
      -> {"price": {"$gte": 10, "$lte": 50}}
    - CourseFilter(search="python")
      -> {"$or": [{"title": re}, {"description": re}]}
    """
    queries: list[dict[str, Any]] = []

    if course_filter.owner_id is not None:
        queries.append(OPERATORS["eq"]("owner_id", course_filter.owner_id))

    if course_filter.status is not None:
        queries.append(OPERATORS["eq"]("status", course_filter.status.value))

    if course_filter.category is not None:
        queries.append(OPERATORS["eq"]("category", course_filter.category))

    queries.extend(_price_queries(course_filter))

    if course_filter.search:
        queries.append(
            {
                "$or": [
                    OPERATORS["contains"](field, course_filter.search)
                    for field in SEARCH_FIELDS
                ],
            },
        )

    if len(queries) == 1:
        return queries[0]
    elif len(queries) > 1:
        return {"$and": queries}

    return {}


def _price_queries(course_filter: CourseFilter) -> list[dict[str, Any]]:
    price_min = course_filter.price_min
    price_max = course_filter.price_max

    if price_min is not None and price_max is not None:
        return [OPERATORS["between"]("price", (price_min, price_max))]
    if price_min is not None:
        return [OPERATORS["ge"]("price", price_min)]
    if price_max is not None:
        return [OPERATORS["le"]("price", price_max)]

    return []
