"""
POJO for the answer to a resource call.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class ResourceResponse:
    """body is JSON-serializable when status is 2xx, otherwise a plain message."""
    status: int
    body: Any

    @property
    def isJSON(self) -> bool:
        return 200 <= self.status < 300
