from abc import ABC, abstractmethod

from getabonus.domain.entities.casino import Casino
from getabonus.domain.value_objects.page import Page


class ListingRepository(ABC):
    """카지노 목록 페이지와 보너스/게임 평점 요약을 저장하는 Port"""

    @abstractmethod
    def save(self, page: Page[Casino]) -> None:
        """목록 페이지를 저장"""
        pass

    @abstractmethod
    def save_item_ratings(self, bonuses: list, games: list) -> None:
        """보너스(RatedBonus)와 게임(RatedGame) 평점 요약을 저장"""
        pass
