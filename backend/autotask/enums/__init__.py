"""
Enums package for the Autotask client.
"""
from autotask.enums.EntityName import EntityName
from autotask.enums.QueryOperator import QueryOperator

__all__ = ['EntityName', 'QueryOperator']
