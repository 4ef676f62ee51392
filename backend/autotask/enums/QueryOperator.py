"""
Enum for query filter operators understood by the entity query endpoints.
"""
from enum import Enum


class QueryOperator(Enum):
    EQUALS = "eq"
    NOT_EQUALS = "noteq"
    BEGINS_WITH = "beginsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_OR_EQUAL = "greaterOrEqual"
    LESS_OR_EQUAL = "lessOrEqual"
    IN = "in"
    NOT_IN = "notIn"
    IS_NULL = "isNull"
    IS_NOT_NULL = "isNotNull"

    @classmethod
    def fromString(cls, value: str) -> 'QueryOperator':
        for operator in cls:
            if operator.value == value:
                return operator
        raise ValueError(f"Unsupported query operator: {value}")
