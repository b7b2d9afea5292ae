from dataclasses import dataclass, field, replace

from getabonus.domain.value_objects.casino_filters import CasinoFilters
from getabonus.domain.value_objects.sort_spec import SortSpec


@dataclass(frozen=True)
class ListingQuery:
    """카지노 목록 화면 상태 (불변)

    검색어/필터/정렬이 바뀌면 page는 항상 1로 돌아간다.
    상태 변경은 with_* 메서드로 새 객체를 만들어서만 한다.
    """

    search: str = ""
    filters: CasinoFilters = field(default_factory=CasinoFilters)
    sort: SortSpec = field(default_factory=SortSpec)
    page: int = 1

    def with_search(self, search: str) -> "ListingQuery":
        return replace(self, search=search, page=1)

    def with_filters(self, filters: CasinoFilters) -> "ListingQuery":
        return replace(self, filters=filters, page=1)

    def with_sort(self, sort: SortSpec) -> "ListingQuery":
        return replace(self, sort=sort, page=1)

    def with_page(self, page: int) -> "ListingQuery":
        return replace(self, page=max(page, 1))

    def toggle_facet(self, name: str, value: str, checked: bool) -> "ListingQuery":
        """목록 facet 체크박스 토글"""
        return self.with_filters(self.filters.toggle(name, value, checked))

    def clear_filters(self) -> "ListingQuery":
        """필터와 검색어 초기화 (정렬은 유지)"""
        return replace(self, search="", filters=CasinoFilters(), page=1)
