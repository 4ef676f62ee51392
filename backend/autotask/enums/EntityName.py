"""
Enum for the Autotask REST collections this client talks to.
"""
from enum import Enum


class EntityName(Enum):
    TICKETS = "Tickets"
    COMPANIES = "Companies"
    CONTACTS = "Contacts"
    RESOURCES = "Resources"
    WEBHOOKS = "Webhooks"
