from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Character:
    id: int
    name: str
    stats: Dict[str, int] = field(default_factory=dict)
