"""
Projects Autotask entities into fixed-column data frames.
"""
from typing import Callable, Dict, List, Optional, Sequence

from autotask.pojos.Company import Company
from autotask.pojos.Contact import Contact
from autotask.pojos.Resource import Resource
from autotask.pojos.Ticket import Ticket
from datasource.enums.QueryType import QueryType
from datasource.pojos.DataFrame import DataFrame, Field
from datasource.utils.DateUtils import parseTime, toEpochMillis


def _time(value: Optional[str]) -> Optional[int]:
    return toEpochMillis(parseTime(value))


def _int(value: Optional[int]) -> int:
    return value if value is not None else 0


class FrameTranslator:
    """
    Column sets:
        tickets:   id, ticketNumber, title, status, priority, createDate, dueDateTime, companyID, queueID
        resources: id, firstName, lastName, email, active
        companies: id, companyName, phone, active, city, state
        contacts:  id, firstName, lastName, email, phone, companyID, active

    Time columns are nullable and hold epoch milliseconds.
    """

    @staticmethod
    def ticketsFrame(tickets: Sequence[Ticket]) -> DataFrame:
        return DataFrame('tickets', [
            Field('id', 'int64', [_int(t.id) for t in tickets]),
            Field('ticketNumber', 'string', [t.ticketNumber for t in tickets]),
            Field('title', 'string', [t.title for t in tickets]),
            Field('status', 'int64', [t.status for t in tickets]),
            Field('priority', 'int64', [t.priority for t in tickets]),
            Field('createDate', 'time', [_time(t.createDate) for t in tickets], nullable=True),
            Field('dueDateTime', 'time', [_time(t.dueDateTime) for t in tickets], nullable=True),
            Field('companyID', 'int64', [_int(t.companyID) for t in tickets]),
            Field('queueID', 'int64', [_int(t.queueID) for t in tickets]),
        ])

    @staticmethod
    def resourcesFrame(resources: Sequence[Resource]) -> DataFrame:
        return DataFrame('resources', [
            Field('id', 'int64', [_int(r.id) for r in resources]),
            Field('firstName', 'string', [r.firstName for r in resources]),
            Field('lastName', 'string', [r.lastName for r in resources]),
            Field('email', 'string', [r.email for r in resources]),
            Field('active', 'bool', [r.active for r in resources]),
        ])

    @staticmethod
    def companiesFrame(companies: Sequence[Company]) -> DataFrame:
        return DataFrame('companies', [
            Field('id', 'int64', [_int(c.id) for c in companies]),
            Field('companyName', 'string', [c.companyName for c in companies]),
            Field('phone', 'string', [c.phone for c in companies]),
            Field('active', 'bool', [c.active for c in companies]),
            Field('city', 'string', [c.city for c in companies]),
            Field('state', 'string', [c.state for c in companies]),
        ])

    @staticmethod
    def contactsFrame(contacts: Sequence[Contact]) -> DataFrame:
        return DataFrame('contacts', [
            Field('id', 'int64', [_int(c.id) for c in contacts]),
            Field('firstName', 'string', [c.firstName for c in contacts]),
            Field('lastName', 'string', [c.lastName for c in contacts]),
            Field('email', 'string', [c.emailAddress for c in contacts]),
            Field('phone', 'string', [c.phone for c in contacts]),
            Field('companyID', 'int64', [_int(c.companyID) for c in contacts]),
            Field('active', 'bool', [c.isActive for c in contacts]),
        ])

    @classmethod
    def toFrame(cls, queryType: QueryType, entities: List) -> DataFrame:
        translators: Dict[QueryType, Callable[[Sequence], DataFrame]] = {
            QueryType.TICKETS: cls.ticketsFrame,
            QueryType.RESOURCES: cls.resourcesFrame,
            QueryType.COMPANIES: cls.companiesFrame,
            QueryType.CONTACTS: cls.contactsFrame,
        }
        return translators[queryType](entities)
