"""
POJO for the Autotask Resources entity (staff users).
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.utils.ValueUtils import compactDict, firstPresent, toBool, toOptionalInt


@dataclass
class Resource:
    id: Optional[int] = None
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    userName: str = ""
    title: str = ""
    active: bool = False

    @classmethod
    def fromAPIResponse(cls, data: Dict[str, Any]) -> 'Resource':
        return cls(
            id=toOptionalInt(data.get('id')),
            firstName=data.get('firstName') or "",
            lastName=data.get('lastName') or "",
            email=data.get('email') or "",
            userName=data.get('userName') or "",
            title=data.get('title') or "",
            active=toBool(firstPresent(data, 'isActive', 'active'))
        )

    def toAPIPayload(self) -> Dict[str, Any]:
        return compactDict({
            'id': self.id,
            'firstName': self.firstName,
            'lastName': self.lastName,
            'email': self.email or None,
            'userName': self.userName or None,
            'title': self.title or None,
            'isActive': self.active
        })
