"""
Capability set shared by every entity POJO: an identity field plus JSON conversion.
"""
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

E = TypeVar('E', bound='AutotaskEntity')


class AutotaskEntity(Protocol):

    id: Optional[int]

    @classmethod
    def fromAPIResponse(cls: Type[E], data: Dict[str, Any]) -> E:
        ...

    def toAPIPayload(self) -> Dict[str, Any]:
        ...
