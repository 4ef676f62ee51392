"""
POJOs for the Autotask client.
"""

from .AutotaskEntity import AutotaskEntity
from .Company import Company
from .Contact import Contact
from .EntityQueryParams import EntityQueryParams
from .FilterTree import FilterTree
from .PageDetails import PageDetails
from .QueryFilter import QueryFilter
from .QueryResult import QueryResult
from .Resource import Resource
from .Ticket import Ticket
from .Webhook import Webhook
from .ZoneInfo import ZoneInfo

__all__ = [
    'AutotaskEntity',
    'Company',
    'Contact',
    'EntityQueryParams',
    'FilterTree',
    'PageDetails',
    'QueryFilter',
    'QueryResult',
    'Resource',
    'Ticket',
    'Webhook',
    'ZoneInfo',
]
