"""
POJO for an Autotask webhook registration.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from autotask.utils.ValueUtils import compactDict, toOptionalInt


@dataclass
class Webhook:
    id: Optional[int] = None
    url: str = ""
    events: List[str] = field(default_factory=list)

    @classmethod
    def fromAPIResponse(cls, data: Dict[str, Any]) -> 'Webhook':
        return cls(
            id=toOptionalInt(data.get('id')),
            url=data.get('url') or "",
            events=list(data.get('events') or [])
        )

    def toAPIPayload(self) -> Dict[str, Any]:
        return compactDict({
            'id': self.id,
            'url': self.url,
            'events': list(self.events)
        })
