from enum import Enum


class HealthStatus(Enum):
    OK = "OK"
    ERROR = "ERROR"
