from dataclasses import dataclass
from datetime import datetime


@dataclass(eq=False)
class Bonus:
    """카지노 보너스 Entity"""

    id: str
    casino_id: str
    title: str
    type: str  # welcome, no_deposit, free_spins, cashback ...
    description: str = ""
    amount: str = ""
    wagering_requirement: str = ""
    min_deposit: str = ""
    max_win: str = ""
    code: str = ""
    valid_until: datetime | None = None
    is_active: bool = True
    is_featured: bool = False
    created_at: datetime | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bonus):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
