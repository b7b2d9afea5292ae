"""카지노 목록 검색/필터/정렬/페이지네이션 파이프라인

입력 컬렉션을 변경하지 않고 항상 새 목록을 반환한다.
"""

import math
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from getabonus.domain.entities.casino import Casino
from getabonus.domain.value_objects.casino_filters import CasinoFilters
from getabonus.domain.value_objects.page import Page
from getabonus.domain.value_objects.sort_spec import SortSpec


DEFAULT_PAGE_SIZE = 20

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# 필터 패널의 안전 지수 구간 (이름, 하한, 상한 미포함)
SAFETY_BANDS: tuple[tuple[str, float, float], ...] = (
    ("very_high", 9.0, math.inf),
    ("high", 8.0, 9.0),
    ("above_average", 7.0, 8.0),
)


def _created_at_key(casino: Casino) -> datetime:
    created_at = casino.created_at
    if created_at is None:
        return EPOCH
    # naive datetime은 UTC로 간주
    if created_at.tzinfo is None:
        return created_at.replace(tzinfo=timezone.utc)
    return created_at


SORT_KEYS: dict[str, Callable[[Casino], object]] = {
    "safetyIndex": lambda c: c.safety_index or 0.0,
    "userRating": lambda c: c.aggregated_user_rating() or 0.0,
    "name": lambda c: (c.name or "").casefold(),
    "established": lambda c: c.established_year or 0,
    "createdAt": _created_at_key,
}


def _any_of(wanted: Sequence[str], offered: Sequence[str]) -> bool:
    return any(value in offered for value in wanted)


class CasinoQueryPipeline:
    """검색어 + facet 필터 + 정렬 + 페이지네이션"""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0: {page_size}")
        self.page_size = page_size

    # ------------------------------------------------------------------
    # 필터
    # ------------------------------------------------------------------

    def filter(
        self,
        casinos: Sequence[Casino],
        query: str | None = None,
        facets: CasinoFilters | None = None,
    ) -> list[Casino]:
        """검색어와 facet 조건을 모두 만족하는 카지노 목록"""
        facets = facets or CasinoFilters()
        needle = (query or "").strip().casefold()

        return [
            casino for casino in casinos
            if self._matches_query(casino, needle) and self._matches_facets(casino, facets)
        ]

    @staticmethod
    def _matches_query(casino: Casino, needle: str) -> bool:
        if not needle:
            return True
        return any(needle in text.casefold() for text in casino.search_fields() if text)

    @staticmethod
    def _matches_facets(casino: Casino, facets: CasinoFilters) -> bool:
        if facets.is_applied("min_safety_index") and (casino.safety_index or 0.0) < facets.min_safety_index:
            return False
        if facets.is_applied("min_expert_rating") and casino.expert_rating() < facets.min_expert_rating:
            return False
        if facets.is_applied("min_user_rating") and casino.aggregated_user_rating() < facets.min_user_rating:
            return False
        if facets.is_applied("license") and casino.license != facets.license:
            return False
        if facets.is_applied("payment_methods") and not _any_of(facets.payment_methods, casino.payment_methods):
            return False
        if facets.is_applied("features") and not _any_of(facets.features, casino.features):
            return False
        if facets.is_applied("game_providers") and not _any_of(facets.game_providers, casino.game_providers):
            return False
        if facets.is_applied("established_year") and (casino.established_year or 0) < facets.established_year:
            return False
        return True

    # ------------------------------------------------------------------
    # 정렬
    # ------------------------------------------------------------------

    def sort(self, casinos: Sequence[Casino], spec: SortSpec | None = None) -> list[Casino]:
        """안정 정렬 (같은 키는 입력 순서 유지, 알 수 없는 필드는 그대로)"""
        spec = spec or SortSpec()
        key = SORT_KEYS.get(spec.field)
        if key is None:
            return list(casinos)
        # sorted()는 reverse=True에서도 동일 키의 상대 순서를 유지한다
        return sorted(casinos, key=key, reverse=spec.descending)

    # ------------------------------------------------------------------
    # 페이지네이션
    # ------------------------------------------------------------------

    def paginate(self, casinos: Sequence[Casino], page: int = 1, page_size: int | None = None) -> Page[Casino]:
        """1부터 시작하는 페이지 조회 (범위 밖이면 빈 items)"""
        page_size = self.page_size if page_size is None else page_size
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0: {page_size}")

        page = max(page, 1)
        total_count = len(casinos)
        start = (page - 1) * page_size

        return Page(
            items=list(casinos[start:start + page_size]),
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total_count / page_size),
            total_count=total_count,
        )

    def run(
        self,
        casinos: Sequence[Casino],
        query: str | None = None,
        facets: CasinoFilters | None = None,
        sort: SortSpec | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[Casino]:
        """filter → sort → paginate"""
        filtered = self.filter(casinos, query, facets)
        return self.paginate(self.sort(filtered, sort), page, page_size)

    # ------------------------------------------------------------------
    # 부가 조회
    # ------------------------------------------------------------------

    def featured(self, casinos: Sequence[Casino]) -> list[Casino]:
        """추천 + 활성 카지노 (안전 지수 내림차순)"""
        candidates = [c for c in casinos if c.is_featured and c.is_active]
        return self.sort(candidates, SortSpec("safetyIndex"))

    @staticmethod
    def safety_band_counts(casinos: Sequence[Casino]) -> dict[str, int]:
        """필터 패널 안전 지수 구간별 카지노 수"""
        counts = {name: 0 for name, _, _ in SAFETY_BANDS}
        for casino in casinos:
            value = casino.safety_index or 0.0
            for name, lower, upper in SAFETY_BANDS:
                if lower <= value < upper:
                    counts[name] += 1
                    break
        return counts
