"""
POJO for the result of one panel query.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from datasource.pojos.DataFrame import DataFrame


@dataclass
class DataResponse:
    status: int = 200
    frames: List[DataFrame] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @staticmethod
    def ofFrames(*frames: DataFrame) -> 'DataResponse':
        return DataResponse(status=200, frames=list(frames))

    @staticmethod
    def ofError(status: int, message: str) -> 'DataResponse':
        return DataResponse(status=status, error=message)

    def toDict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {'status': self.status, 'error': self.error}
        return {'status': self.status, 'frames': [frame.toDict() for frame in self.frames]}
