import logging
from dataclasses import dataclass

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.game import Game
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.services.rating_aggregator import RatingAggregator
from getabonus.domain.value_objects.item_ratings import CardRating, ItemRatings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatedBonus:
    bonus: Bonus
    ratings: ItemRatings


@dataclass(frozen=True)
class RatedGame:
    game: Game
    ratings: ItemRatings
    card: CardRating


class RateCatalogItemsUseCase:
    """활성 보너스와 게임에 유저 평점 요약을 붙이는 Use Case"""

    def __init__(self, catalog: CatalogSource, aggregator: RatingAggregator | None = None):
        self.catalog = catalog
        self.aggregator = aggregator or RatingAggregator()

    def rate_bonuses(self, casino_id: str | None = None) -> list[RatedBonus]:
        rated = [
            RatedBonus(bonus, self.aggregator.item_ratings(self.catalog.fetch_bonus_reviews(bonus.id)))
            for bonus in self.catalog.fetch_bonuses(casino_id)
        ]
        logger.info(f"Rated {len(rated)} bonuses")
        return rated

    def rate_games(self) -> list[RatedGame]:
        rated = []
        for game in self.catalog.fetch_games():
            reviews = self.catalog.fetch_game_reviews(game.id)
            rated.append(
                RatedGame(
                    game=game,
                    ratings=self.aggregator.item_ratings(reviews),
                    card=self.aggregator.game_card_rating(reviews),
                )
            )
        logger.info(f"Rated {len(rated)} games")
        return rated

    def execute(self) -> tuple[list[RatedBonus], list[RatedGame]]:
        return self.rate_bonuses(), self.rate_games()
