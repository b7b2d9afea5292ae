"""/api/casinos query string → ListingQuery 변환"""

import logging
from collections.abc import Mapping

from getabonus.application.listing_state import ListingQuery
from getabonus.domain.value_objects.casino_filters import CasinoFilters
from getabonus.domain.value_objects.sort_spec import DEFAULT_SORT_FIELD, SortDirection, SortSpec

logger = logging.getLogger(__name__)


def _parse_float(params: Mapping[str, str], key: str) -> float | None:
    raw = (params.get(key) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.debug(f"Ignoring non-numeric {key}={raw!r}")
        return None


def _parse_int(params: Mapping[str, str], key: str) -> int | None:
    raw = (params.get(key) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.debug(f"Ignoring non-integer {key}={raw!r}")
        return None


def _parse_list(params: Mapping[str, str], key: str) -> tuple[str, ...] | None:
    """콤마로 연결된 값 목록 (빈 항목 제거)"""
    raw = params.get(key) or ""
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values or None


def parse_listing_query(params: Mapping[str, str]) -> ListingQuery:
    """query string 파라미터를 목록 조회 조건으로 변환

    숫자로 해석할 수 없는 값은 해당 facet을 적용하지 않는다.
    """
    filters = CasinoFilters(
        min_safety_index=_parse_float(params, "minSafetyIndex"),
        min_expert_rating=_parse_float(params, "minExpertRating"),
        min_user_rating=_parse_float(params, "minUserRating"),
        license=(params.get("license") or "").strip() or None,
        payment_methods=_parse_list(params, "paymentMethods"),
        features=_parse_list(params, "features"),
        game_providers=_parse_list(params, "gameProviders"),
        established_year=_parse_int(params, "establishedYear"),
    )

    order = (params.get("order") or "").strip().lower()
    direction = SortDirection.ASC if order == SortDirection.ASC.value else SortDirection.DESC
    sort = SortSpec(field=(params.get("sort") or "").strip() or DEFAULT_SORT_FIELD, direction=direction)

    page = _parse_int(params, "page") or 1

    return ListingQuery(
        search=params.get("search") or "",
        filters=filters,
        sort=sort,
        page=max(page, 1),
    )
