"""
Holiday record shared by all pipeline stages.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class Holiday:
    """One holiday observance, for one or more states."""
    date: str  # YYYY-MM-DD, or a fallback marker when the source text didn't parse
    day: str
    name: str
    states: List[str] = field(default_factory=list)

    @property
    def merge_key(self) -> Tuple[str, str]:
        """Records with the same key describe the same observance."""
        return (self.date, self.name)

    def to_dict(self) -> Dict:
        """Convert to the JSON object form."""
        return {
            'date': self.date,
            'day': self.day,
            'name': self.name,
            'states': list(self.states),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Holiday':
        return cls(
            date=data['date'],
            day=data['day'],
            name=data['name'],
            states=list(data.get('states', [])),
        )
