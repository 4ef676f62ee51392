from dataclasses import dataclass
from typing import Any, Dict

from datasource.enums.HealthStatus import HealthStatus


@dataclass
class HealthCheckResult:
    status: HealthStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status == HealthStatus.OK

    def toDict(self) -> Dict[str, Any]:
        return {'status': self.status.value, 'message': self.message}
