"""
Enum for the panel query types the datasource answers.
"""
from enum import Enum

from autotask.enums.EntityName import EntityName


class QueryType(Enum):
    TICKETS = "tickets"
    RESOURCES = "resources"
    COMPANIES = "companies"
    CONTACTS = "contacts"

    @property
    def entityName(self) -> EntityName:
        return {
            QueryType.TICKETS: EntityName.TICKETS,
            QueryType.RESOURCES: EntityName.RESOURCES,
            QueryType.COMPANIES: EntityName.COMPANIES,
            QueryType.CONTACTS: EntityName.CONTACTS,
        }[self]

    @classmethod
    def fromString(cls, value: str) -> 'QueryType':
        for queryType in cls:
            if queryType.value == value:
                return queryType
        raise ValueError(f"unknown query type: {value}")
