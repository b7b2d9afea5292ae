from abc import ABC, abstractmethod

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review


class CatalogSource(ABC):
    """카지노/리뷰/보너스/게임 데이터를 제공하는 저장소 Port

    구현체는 활성(active) 카지노와 게시된(published) 리뷰만 반환해야 한다.
    """

    @abstractmethod
    def fetch_casinos(self) -> list[Casino]:
        """활성 카지노 전체 조회"""
        pass

    @abstractmethod
    def fetch_user_reviews(self, casino_id: str) -> list[Review]:
        """카지노의 게시된 유저 리뷰 조회"""
        pass

    @abstractmethod
    def fetch_expert_reviews(self, casino_id: str) -> list[ExpertReview]:
        """카지노의 전문가 리뷰 조회"""
        pass

    @abstractmethod
    def fetch_bonus_reviews(self, bonus_id: str) -> list[Review]:
        """보너스의 게시된 유저 리뷰 조회"""
        pass

    @abstractmethod
    def fetch_game_reviews(self, game_id: str) -> list[Review]:
        """게임의 게시된 유저 리뷰 조회"""
        pass

    @abstractmethod
    def fetch_bonuses(self, casino_id: str | None = None) -> list[Bonus]:
        """활성 보너스 조회 (casino_id가 있으면 해당 카지노만)"""
        pass

    @abstractmethod
    def fetch_games(self) -> list[Game]:
        """활성 게임 조회"""
        pass
