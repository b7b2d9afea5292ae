from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review

__all__ = ["Bonus", "Casino", "ExpertReview", "Game", "Review"]
