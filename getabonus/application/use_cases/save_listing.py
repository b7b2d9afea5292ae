from datetime import datetime, timezone
from typing import Callable

from getabonus.domain.entities.casino import Casino
from getabonus.domain.value_objects.page import Page


def format_rating(value: float | None) -> str | None:
    """표시용 소수점 한 자리 문자열"""
    if value is None:
        return None
    return f"{value:.1f}"


def progress_value(value: float | None) -> float:
    """진행 막대 값 (0-10 평점 × 10)"""
    return round((value or 0.0) * 10, 1)


class SaveListingUseCase:
    """목록 페이지를 저장 가능한 스냅샷으로 변환"""

    def __init__(self, casino_to_dict: Callable[[Casino], dict]):
        self._casino_to_dict = casino_to_dict

    def execute(self, page: Page[Casino]) -> dict:
        return {
            "updated": datetime.now(timezone.utc).isoformat(),
            "pagination": {
                "page": page.page,
                "pageSize": page.page_size,
                "totalPages": page.total_pages,
                "totalCount": page.total_count,
                "hasNext": page.has_next(),
                "hasPrevious": page.has_previous(),
            },
            "casinos": [self._casino_to_dict(casino) for casino in page.items],
        }
