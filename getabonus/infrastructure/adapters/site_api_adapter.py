"""사이트 REST API를 통한 카탈로그 조회 어댑터

- GET /api/casinos: 활성 카지노 목록
- GET /api/reviews/casino/{id}: 게시된 유저 리뷰
- GET /api/reviews/bonus/{id}, /api/reviews/game/{id}: 보너스/게임 유저 리뷰
- GET /api/expert-reviews/casino/{id}: 전문가 리뷰
- GET /api/bonuses?casinoId=: 활성 보너스
- GET /api/games: 활성 게임
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import httpx

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.infrastructure import mappers

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SiteApiAdapter(CatalogSource):
    """REST API 기반 CatalogSource (HTTP 오류 시 빈 목록)"""

    CASINOS_PATH = "/api/casinos"
    USER_REVIEWS_PATH = "/api/reviews/casino/{casino_id}"
    BONUS_REVIEWS_PATH = "/api/reviews/bonus/{bonus_id}"
    GAME_REVIEWS_PATH = "/api/reviews/game/{game_id}"
    EXPERT_REVIEWS_PATH = "/api/expert-reviews/casino/{casino_id}"
    BONUSES_PATH = "/api/bonuses"
    GAMES_PATH = "/api/games"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def fetch_casinos(self) -> list[Casino]:
        return self._fetch_list(self.CASINOS_PATH, mappers.dict_to_casino)

    def fetch_user_reviews(self, casino_id: str) -> list[Review]:
        path = self.USER_REVIEWS_PATH.format(casino_id=casino_id)
        return self._fetch_list(path, mappers.dict_to_review)

    def fetch_expert_reviews(self, casino_id: str) -> list[ExpertReview]:
        path = self.EXPERT_REVIEWS_PATH.format(casino_id=casino_id)
        return self._fetch_list(path, mappers.dict_to_expert_review)

    def fetch_bonus_reviews(self, bonus_id: str) -> list[Review]:
        path = self.BONUS_REVIEWS_PATH.format(bonus_id=bonus_id)
        return self._fetch_list(path, mappers.dict_to_review)

    def fetch_game_reviews(self, game_id: str) -> list[Review]:
        path = self.GAME_REVIEWS_PATH.format(game_id=game_id)
        return self._fetch_list(path, mappers.dict_to_review)

    def fetch_bonuses(self, casino_id: str | None = None) -> list[Bonus]:
        params = {"casinoId": casino_id} if casino_id else None
        return self._fetch_list(self.BONUSES_PATH, mappers.dict_to_bonus, params)

    def fetch_games(self) -> list[Game]:
        return self._fetch_list(self.GAMES_PATH, mappers.dict_to_game)

    def _fetch_list(
        self,
        path: str,
        mapper: Callable[[dict], T | None],
        params: dict | None = None,
    ) -> list[T]:
        """JSON 배열 응답을 Entity 목록으로 변환 (변환 실패 레코드는 건너뜀)"""
        records = self._get_json(path, params)
        if not isinstance(records, list):
            if records is not None:
                logger.warning(f"Expected a JSON array from {path}, got {type(records).__name__}")
            return []

        entities = []
        for record in records:
            if not isinstance(record, dict):
                continue
            entity = mapper(record)
            if entity is not None:
                entities.append(entity)
        return entities

    def _get_json(self, path: str, params: dict | None = None):
        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = client.get(path, params=params)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPError as e:
            logger.warning(f"Site API request failed for {path}: {e}")
            return None
        except ValueError as e:
            logger.warning(f"Site API returned invalid JSON for {path}: {e}")
            return None
