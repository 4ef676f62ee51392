"""
POJO for the Autotask Companies entity.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.utils.ValueUtils import compactDict, firstPresent, toBool, toOptionalInt


@dataclass
class Company:
    id: Optional[int] = None
    companyName: str = ""
    companyNumber: str = ""
    companyType: Optional[int] = None
    phone: str = ""
    webAddress: str = ""
    active: bool = False
    address1: str = ""
    city: str = ""
    state: str = ""
    postalCode: str = ""
    createDate: Optional[str] = None
    lastActivityDate: Optional[str] = None

    @classmethod
    def fromAPIResponse(cls, data: Dict[str, Any]) -> 'Company':
        return cls(
            id=toOptionalInt(data.get('id')),
            companyName=data.get('companyName') or "",
            companyNumber=data.get('companyNumber') or "",
            companyType=toOptionalInt(data.get('companyType')),
            phone=data.get('phone') or "",
            webAddress=data.get('webAddress') or "",
            active=toBool(firstPresent(data, 'isActive', 'active')),
            address1=data.get('address1') or "",
            city=data.get('city') or "",
            state=data.get('state') or "",
            postalCode=data.get('postalCode') or "",
            createDate=data.get('createDate'),
            lastActivityDate=data.get('lastActivityDate')
        )

    def toAPIPayload(self) -> Dict[str, Any]:
        return compactDict({
            'id': self.id,
            'companyName': self.companyName,
            'companyNumber': self.companyNumber or None,
            'companyType': self.companyType,
            'phone': self.phone or None,
            'webAddress': self.webAddress or None,
            'isActive': self.active,
            'address1': self.address1 or None,
            'city': self.city or None,
            'state': self.state or None,
            'postalCode': self.postalCode or None
        })
