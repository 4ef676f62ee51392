"""
POJO for the Autotask Contacts entity.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.utils.ValueUtils import compactDict, firstPresent, toBool, toOptionalInt


@dataclass
class Contact:
    id: Optional[int] = None
    firstName: str = ""
    lastName: str = ""
    emailAddress: str = ""
    phone: str = ""
    mobilePhone: str = ""
    title: str = ""
    companyID: Optional[int] = None
    isActive: bool = False
    createDate: Optional[str] = None
    lastActivityDate: Optional[str] = None

    @classmethod
    def fromAPIResponse(cls, data: Dict[str, Any]) -> 'Contact':
        return cls(
            id=toOptionalInt(data.get('id')),
            firstName=data.get('firstName') or "",
            lastName=data.get('lastName') or "",
            emailAddress=data.get('emailAddress') or "",
            phone=data.get('phone') or "",
            mobilePhone=data.get('mobilePhone') or "",
            title=data.get('title') or "",
            companyID=toOptionalInt(data.get('companyID')),
            isActive=toBool(firstPresent(data, 'isActive', 'active')),
            createDate=data.get('createDate'),
            lastActivityDate=data.get('lastActivityDate')
        )

    def toAPIPayload(self) -> Dict[str, Any]:
        return compactDict({
            'id': self.id,
            'firstName': self.firstName,
            'lastName': self.lastName,
            'emailAddress': self.emailAddress or None,
            'phone': self.phone or None,
            'mobilePhone': self.mobilePhone or None,
            'title': self.title or None,
            'companyID': self.companyID,
            'isActive': 1 if self.isActive else 0
        })
