from dataclasses import dataclass, fields, replace


LIST_FACETS: tuple[str, ...] = ("payment_methods", "features", "game_providers")
THRESHOLD_FACETS: tuple[str, ...] = (
    "min_safety_index",
    "min_expert_rating",
    "min_user_rating",
    "established_year",
)


@dataclass(frozen=True)
class CasinoFilters:
    """카지노 목록 필터 조건 (지원 facet이 고정된 Value Object)

    - 값이 None이거나 빈 목록인 facet은 적용하지 않는다.
    - facet끼리는 AND, 목록 facet 내부는 OR(하나라도 일치)로 결합한다.
    """

    min_safety_index: float | None = None
    min_expert_rating: float | None = None
    min_user_rating: float | None = None
    license: str | None = None
    payment_methods: tuple[str, ...] | None = None
    features: tuple[str, ...] | None = None
    game_providers: tuple[str, ...] | None = None
    established_year: int | None = None

    def __post_init__(self):
        # list로 넘어와도 불변 tuple로 보관
        for name in LIST_FACETS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def is_applied(self, name: str) -> bool:
        """facet이 실제로 필터링에 참여하는지 확인"""
        value = getattr(self, name)
        if value is None:
            return False
        if name in LIST_FACETS:
            return len(value) > 0
        if name == "license":
            return value != ""
        return True

    def active_count(self) -> int:
        """적용 중인 facet 개수"""
        return sum(1 for f in fields(self) if self.is_applied(f.name))

    def toggle(self, name: str, value: str, checked: bool) -> "CasinoFilters":
        """목록 facet에 값을 추가/제거한 새 필터 반환 (비면 None)"""
        if name not in LIST_FACETS:
            raise ValueError(f"{name} is not a list facet")

        current = list(getattr(self, name) or ())
        if checked:
            if value not in current:
                current.append(value)
        else:
            current = [item for item in current if item != value]

        return replace(self, **{name: tuple(current) if current else None})

    def with_value(self, name: str, value: object) -> "CasinoFilters":
        """단일 facet 값을 바꾼 새 필터 반환"""
        if name not in {f.name for f in fields(self)}:
            raise ValueError(f"Unknown facet: {name}")
        return replace(self, **{name: value})
