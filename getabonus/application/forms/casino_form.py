"""관리자 카지노 등록/수정 폼 상태

폼 상태는 불변 레코드이며 update_casino_form()으로만 갱신한다.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, timezone
from urllib.parse import urlparse

from getabonus.domain.entities.casino import Casino


MIN_NAME_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 10
MIN_LICENSE_LENGTH = 5
MIN_ESTABLISHED_YEAR = 1990
MIN_SAFETY_INDEX = 0.0
MAX_SAFETY_INDEX = 10.0

_LIST_FIELDS = ("payment_methods", "supported_currencies", "game_providers", "features")


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class CasinoFormState:
    """카지노 폼 입력값"""

    name: str = ""
    description: str = ""
    website_url: str = ""
    logo_url: str = ""
    license: str = ""
    established_year: int = field(default_factory=lambda: date.today().year)
    safety_index: float = 5.0
    payment_methods: tuple[str, ...] = ()
    supported_currencies: tuple[str, ...] = ()
    game_providers: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    is_active: bool = True
    is_featured: bool = False

    @classmethod
    def from_casino(cls, casino: Casino) -> "CasinoFormState":
        """기존 카지노 수정용 초기 상태"""
        return cls(
            name=casino.name,
            description=casino.description or "",
            website_url=casino.website_url or "",
            logo_url=casino.logo_url or "",
            license=casino.license or "",
            established_year=casino.established_year or date.today().year,
            safety_index=casino.safety_index,
            payment_methods=tuple(casino.payment_methods),
            supported_currencies=tuple(casino.supported_currencies),
            game_providers=tuple(casino.game_providers),
            features=tuple(casino.features),
            is_active=casino.is_active,
            is_featured=casino.is_featured,
        )

    def validate(self) -> dict[str, str]:
        """필드별 오류 메시지 (비어 있으면 유효)"""
        errors: dict[str, str] = {}

        if len(self.name.strip()) < MIN_NAME_LENGTH:
            errors["name"] = f"Name must be at least {MIN_NAME_LENGTH} characters"
        if len(self.description.strip()) < MIN_DESCRIPTION_LENGTH:
            errors["description"] = f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"
        if not _is_valid_url(self.website_url):
            errors["website_url"] = "Please enter a valid URL"
        if self.logo_url and not _is_valid_url(self.logo_url):
            errors["logo_url"] = "Please enter a valid logo URL"
        if len(self.license.strip()) < MIN_LICENSE_LENGTH:
            errors["license"] = "License information is required"

        current_year = date.today().year
        if not MIN_ESTABLISHED_YEAR <= self.established_year <= current_year:
            errors["established_year"] = f"Year must be {MIN_ESTABLISHED_YEAR}-{current_year}"
        if not MIN_SAFETY_INDEX <= self.safety_index <= MAX_SAFETY_INDEX:
            errors["safety_index"] = f"Safety index must be {MIN_SAFETY_INDEX}-{MAX_SAFETY_INDEX}"

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def to_casino(self, casino_id: str, created_at: datetime | None = None) -> Casino:
        """검증을 통과한 폼으로 Casino 생성"""
        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid casino form: {errors}")

        now = datetime.now(timezone.utc)
        return Casino(
            id=casino_id,
            name=self.name.strip(),
            description=self.description.strip(),
            website_url=self.website_url,
            logo_url=self.logo_url,
            safety_index=self.safety_index,
            license=self.license.strip(),
            established_year=self.established_year,
            payment_methods=list(self.payment_methods),
            supported_currencies=list(self.supported_currencies),
            game_providers=list(self.game_providers),
            features=list(self.features),
            is_active=self.is_active,
            is_featured=self.is_featured,
            created_at=created_at or now,
            updated_at=now,
        )


_FIELD_NAMES = frozenset(f.name for f in fields(CasinoFormState))


def update_casino_form(state: CasinoFormState, name: str, value: object) -> CasinoFormState:
    """폼 필드 하나를 바꾼 새 상태 반환 (알 수 없는 필드는 ValueError)"""
    if name not in _FIELD_NAMES:
        raise ValueError(f"Unknown casino form field: {name}")
    if name in _LIST_FIELDS:
        value = tuple(value)
    return replace(state, **{name: value})
