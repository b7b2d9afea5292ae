import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from getabonus.application.use_cases.rate_items import RatedBonus, RatedGame
from getabonus.application.use_cases.save_listing import SaveListingUseCase, format_rating, progress_value
from getabonus.domain.entities.casino import Casino
from getabonus.domain.ports.listing_repository import ListingRepository
from getabonus.domain.value_objects.casino_ratings import score_color
from getabonus.domain.value_objects.page import Page
from getabonus.domain.value_objects.rating_breakdown import RatingBreakdown

logger = logging.getLogger(__name__)


class JsonFileRepository(ListingRepository):
    """카지노 목록 페이지를 JSON 파일로 저장하는 Repository"""

    def __init__(self, output_path: Path):
        self.output_path = output_path

    def save(self, page: Page[Casino]) -> None:
        """목록 페이지를 JSON 파일로 저장"""
        logger.info(f"Saving listing page {page.page} ({len(page.items)} casinos)")
        output_data = SaveListingUseCase(self._casino_to_dict).execute(page)
        self._write_to_file(output_data)

    def save_item_ratings(self, bonuses: list[RatedBonus], games: list[RatedGame]) -> None:
        """보너스/게임 평점 요약을 JSON 파일로 저장"""
        logger.info(f"Saving ratings for {len(bonuses)} bonuses and {len(games)} games")
        self._write_to_file(
            {
                "updated": datetime.now(timezone.utc).isoformat(),
                "bonuses": [self._rated_bonus_to_dict(item) for item in bonuses],
                "games": [self._rated_game_to_dict(item) for item in games],
            }
        )

    def _write_to_file(self, output_data: dict) -> None:
        """임시 파일에 쓴 뒤 rename (쓰기 도중 실패해도 기존 파일 유지)"""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        temp_path = self.output_path.with_suffix(".tmp")
        try:
            temp_path.write_text(
                json.dumps(output_data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            temp_path.rename(self.output_path)
            logger.info(f"Successfully saved data to {self.output_path}")
        except Exception as e:
            logger.error(f"Failed to write data to {self.output_path}: {e}")
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _casino_to_dict(self, casino: Casino) -> dict:
        """Casino 엔티티를 딕셔너리로 변환"""
        casino_dict = {
            "id": casino.id,
            "name": casino.name,
            "description": casino.description,
            "logoUrl": casino.logo_url,
            "websiteUrl": casino.website_url,
            "affiliateUrl": casino.affiliate_url,
            "license": casino.license,
            "establishedYear": casino.established_year,
            "paymentMethods": casino.payment_methods,
            "gameProviders": casino.game_providers,
            "features": casino.features,
            "isFeatured": casino.is_featured,
            "safetyIndex": format_rating(casino.safety_index),
            "scoreColor": score_color(casino.safety_index),
        }

        if casino.ratings:
            casino_dict["ratings"] = {
                "safetyIndex": format_rating(casino.ratings.safety_index),
                "expertRating": format_rating(casino.ratings.expert_rating),
                "userRating": format_rating(casino.ratings.user_rating),
                "totalUserReviews": casino.ratings.total_user_reviews,
                "progress": progress_value(casino.ratings.safety_index),
                "userBreakdown": self._breakdown_to_dict(casino.ratings.user_breakdown),
                "expertBreakdown": self._breakdown_to_dict(casino.ratings.expert_breakdown),
            }

        return casino_dict

    @staticmethod
    def _rated_bonus_to_dict(item: RatedBonus) -> dict:
        return {
            "id": item.bonus.id,
            "casinoId": item.bonus.casino_id,
            "title": item.bonus.title,
            "userReviewsAverage": item.ratings.user_average,
            "totalReviews": item.ratings.total_reviews,
        }

    @staticmethod
    def _rated_game_to_dict(item: RatedGame) -> dict:
        return {
            "id": item.game.id,
            "name": item.game.name,
            "provider": item.game.provider,
            "userReviewsAverage": item.ratings.user_average,
            "totalReviews": item.ratings.total_reviews,
            "rating": item.card.formatted(),
            "ratingCount": item.card.review_count,
        }

    @staticmethod
    def _breakdown_to_dict(breakdown: RatingBreakdown | None) -> dict | None:
        if breakdown is None:
            return None
        return {key: format_rating(value) for key, value in breakdown.as_dict().items()}
