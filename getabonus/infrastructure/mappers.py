"""사이트 JSON 레코드(camelCase) → 도메인 Entity 변환

REST API 응답과 data.json 저장소가 같은 레코드 형식을 쓰므로 두 어댑터가 공유한다.
변환할 수 없는 레코드는 None을 반환하고 호출 측에서 건너뛴다.
"""

import logging
from datetime import datetime

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review
from getabonus.domain.value_objects.category_ratings import CategoryRatings

logger = logging.getLogger(__name__)

# 도메인 카테고리 → 레코드 키 접두어
CATEGORY_FIELD_PREFIXES: dict[str, str] = {
    "bonuses": "bonuses",
    "design": "design",
    "payouts": "payouts",
    "customer_support": "customerSupport",
    "game_selection": "gameSelection",
    "mobile_experience": "mobileExperience",
}


def parse_decimal(value, default: float | None = None) -> float | None:
    """decimal 컬럼은 "9.2" 같은 문자열로 오기도 한다"""
    if value is None or value == "":
        return default
    return float(value)


def parse_datetime(value) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def _category_ratings(record: dict) -> CategoryRatings:
    return CategoryRatings(**{
        key: parse_decimal(record.get(f"{prefix}Rating"))
        for key, prefix in CATEGORY_FIELD_PREFIXES.items()
    })


def dict_to_casino(record: dict) -> Casino | None:
    try:
        return Casino(
            id=str(record["id"]),
            name=record.get("name", ""),
            description=record.get("description") or "",
            website_url=record.get("websiteUrl") or "",
            logo_url=record.get("logoUrl") or "",
            affiliate_url=record.get("affiliateUrl") or "",
            safety_index=parse_decimal(record.get("safetyIndex"), 0.0),
            user_rating=parse_decimal(record.get("userRating"), 0.0),
            total_reviews=int(record.get("totalReviews") or 0),
            license=record.get("license"),
            established_year=record.get("establishedYear"),
            payment_methods=_string_list(record.get("paymentMethods")),
            supported_currencies=_string_list(record.get("supportedCurrencies")),
            game_providers=_string_list(record.get("gameProviders")),
            features=_string_list(record.get("features")),
            restricted_countries=_string_list(record.get("restrictedCountries")),
            is_active=record.get("isActive", True),
            is_featured=record.get("isFeatured", False),
            created_at=parse_datetime(record.get("createdAt")),
            updated_at=parse_datetime(record.get("updatedAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed casino record {record.get('id', '?')}: {e}")
        return None


def dict_to_review(record: dict) -> Review | None:
    try:
        return Review(
            id=str(record["id"]),
            overall_rating=int(record["overallRating"]),
            casino_id=record.get("casinoId"),
            bonus_id=record.get("bonusId"),
            game_id=record.get("gameId"),
            title=record.get("title") or "",
            content=record.get("content") or "",
            category_ratings=_category_ratings(record),
            pros=_string_list(record.get("pros")),
            cons=_string_list(record.get("cons")),
            helpful_votes=int(record.get("helpfulVotes") or 0),
            is_published=record.get("isPublished", True),
            is_verified=record.get("isVerified", False),
            created_at=parse_datetime(record.get("createdAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed review record {record.get('id', '?')}: {e}")
        return None


def dict_to_expert_review(record: dict) -> ExpertReview | None:
    try:
        return ExpertReview(
            id=str(record["id"]),
            casino_id=str(record["casinoId"]),
            overall_rating=parse_decimal(record["overallRating"]),
            category_ratings=_category_ratings(record),
            explanations={
                key: record[f"{prefix}Explanation"]
                for key, prefix in CATEGORY_FIELD_PREFIXES.items()
                if record.get(f"{prefix}Explanation")
            },
            summary=record.get("summary") or "",
            author_id=record.get("authorId"),
            created_at=parse_datetime(record.get("createdAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed expert review record {record.get('id', '?')}: {e}")
        return None


def dict_to_bonus(record: dict) -> Bonus | None:
    try:
        return Bonus(
            id=str(record["id"]),
            casino_id=str(record["casinoId"]),
            title=record.get("title", ""),
            type=record.get("type", ""),
            description=record.get("description") or "",
            amount=record.get("amount") or "",
            wagering_requirement=record.get("wageringRequirement") or "",
            min_deposit=record.get("minDeposit") or "",
            max_win=record.get("maxWin") or "",
            code=record.get("code") or "",
            valid_until=parse_datetime(record.get("validUntil")),
            is_active=record.get("isActive", True),
            is_featured=record.get("isFeatured", False),
            created_at=parse_datetime(record.get("createdAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed bonus record {record.get('id', '?')}: {e}")
        return None


def dict_to_game(record: dict) -> Game | None:
    try:
        return Game(
            id=str(record["id"]),
            name=record.get("name", ""),
            provider=record.get("provider") or "",
            type=record.get("type") or "",
            rtp=parse_decimal(record.get("rtp")),
            volatility=record.get("volatility") or "",
            tags=_string_list(record.get("tags")),
            is_active=record.get("isActive", True),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping malformed game record {record.get('id', '?')}: {e}")
        return None
