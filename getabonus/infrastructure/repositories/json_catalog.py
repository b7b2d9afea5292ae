import json
import logging
from pathlib import Path

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.infrastructure import mappers

logger = logging.getLogger(__name__)

COLLECTION_KEYS = ("casinos", "bonuses", "games", "reviews", "expertReviews")


class JsonCatalogSource(CatalogSource):
    """사이트 data.json 저장소를 읽는 CatalogSource

    파일은 최초 조회 시 한 번만 읽는다. 활성 카지노/보너스/게임과
    게시된 리뷰만 반환한다.
    """

    def __init__(self, data_path: Path):
        self.data_path = data_path
        self._data: dict | None = None

    def fetch_casinos(self) -> list[Casino]:
        casinos = self._convert("casinos", mappers.dict_to_casino)
        return [c for c in casinos if c.is_active]

    def fetch_user_reviews(self, casino_id: str) -> list[Review]:
        reviews = self._convert("reviews", mappers.dict_to_review)
        return [r for r in reviews if r.casino_id == casino_id and r.is_published]

    def fetch_expert_reviews(self, casino_id: str) -> list[ExpertReview]:
        reviews = self._convert("expertReviews", mappers.dict_to_expert_review)
        return [r for r in reviews if r.casino_id == casino_id]

    def fetch_bonus_reviews(self, bonus_id: str) -> list[Review]:
        reviews = self._convert("reviews", mappers.dict_to_review)
        return [r for r in reviews if r.bonus_id == bonus_id and r.is_published]

    def fetch_game_reviews(self, game_id: str) -> list[Review]:
        reviews = self._convert("reviews", mappers.dict_to_review)
        return [r for r in reviews if r.game_id == game_id and r.is_published]

    def fetch_bonuses(self, casino_id: str | None = None) -> list[Bonus]:
        bonuses = self._convert("bonuses", mappers.dict_to_bonus)
        return [
            b for b in bonuses
            if b.is_active and (casino_id is None or b.casino_id == casino_id)
        ]

    def fetch_games(self) -> list[Game]:
        games = self._convert("games", mappers.dict_to_game)
        return [g for g in games if g.is_active]

    def _convert(self, key: str, mapper) -> list:
        converted = []
        for record in self._load_data().get(key, []):
            if not isinstance(record, dict):
                continue
            entity = mapper(record)
            if entity is not None:
                converted.append(entity)
        return converted

    def _load_data(self) -> dict:
        """data.json 로드 및 데이터 구조 검증"""
        if self._data is not None:
            return self._data

        self._data = {key: [] for key in COLLECTION_KEYS}
        if not self.data_path.exists():
            logger.warning(f"Catalog file not found: {self.data_path}")
            return self._data

        try:
            data = json.loads(self.data_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Failed to load catalog from {self.data_path}: {e}")
            return self._data

        if not isinstance(data, dict):
            logger.error(f"Catalog root must be an object: {self.data_path}")
            return self._data

        # 누락되었거나 목록이 아닌 컬렉션은 빈 리스트로 둔다
        for key in COLLECTION_KEYS:
            if isinstance(data.get(key), list):
                self._data[key] = data[key]

        logger.info(f"Loaded catalog from {self.data_path}")
        return self._data
