from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """페이지네이션 결과 (1부터 시작하는 page)"""

    items: list[T] = field(default_factory=list)
    page: int = 1
    page_size: int = 20
    total_pages: int = 0
    total_count: int = 0

    def has_next(self) -> bool:
        return self.page < self.total_pages

    def has_previous(self) -> bool:
        return self.page > 1
