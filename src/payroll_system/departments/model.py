from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    status: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
