"""
POJO for the Autotask Tickets entity.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.utils.ValueUtils import compactDict, toOptionalInt


@dataclass
class Ticket:
    """
    A service ticket.

    Date fields are kept as the RFC3339 strings Autotask returns;
    frame projection parses them into timestamps.
    """
    id: Optional[int] = None
    ticketNumber: str = ""
    title: str = ""
    description: str = ""
    status: int = 0
    priority: int = 0
    createDate: Optional[str] = None
    dueDateTime: Optional[str] = None
    lastActivityDate: Optional[str] = None
    completedDate: Optional[str] = None
    companyID: Optional[int] = None
    contactID: Optional[int] = None
    queueID: Optional[int] = None
    assignedResourceID: Optional[int] = None

    @classmethod
    def fromAPIResponse(cls, data: Dict[str, Any]) -> 'Ticket':
        return cls(
            id=toOptionalInt(data.get('id')),
            ticketNumber=data.get('ticketNumber') or "",
            title=data.get('title') or "",
            description=data.get('description') or "",
            status=toOptionalInt(data.get('status')) or 0,
            priority=toOptionalInt(data.get('priority')) or 0,
            createDate=data.get('createDate'),
            dueDateTime=data.get('dueDateTime'),
            lastActivityDate=data.get('lastActivityDate'),
            completedDate=data.get('completedDate'),
            companyID=toOptionalInt(data.get('companyID')),
            contactID=toOptionalInt(data.get('contactID')),
            queueID=toOptionalInt(data.get('queueID')),
            assignedResourceID=toOptionalInt(data.get('assignedResourceID'))
        )

    def toAPIPayload(self) -> Dict[str, Any]:
        return compactDict({
            'id': self.id,
            'ticketNumber': self.ticketNumber or None,
            'title': self.title,
            'description': self.description or None,
            'status': self.status,
            'priority': self.priority,
            'dueDateTime': self.dueDateTime,
            'companyID': self.companyID,
            'contactID': self.contactID,
            'queueID': self.queueID,
            'assignedResourceID': self.assignedResourceID
        })
