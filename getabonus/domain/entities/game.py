from dataclasses import dataclass, field


@dataclass(eq=False)
class Game:
    """카지노 게임 Entity (슬롯, 라이브 등)"""

    id: str
    name: str
    provider: str = ""
    type: str = ""
    rtp: float | None = None
    volatility: str = ""
    tags: list[str] = field(default_factory=list)
    is_active: bool = True

    def __eq__(self, other: object) -> bool:
        """ID 기반 동등성 비교"""
        if not isinstance(other, Game):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        """ID 기반 해시"""
        return hash(self.id)
