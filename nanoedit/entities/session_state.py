from dataclasses import dataclass, field
from enum import Enum

from nanoedit.entities.image import EditResult


class AppStatus(str, Enum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Idle:
    status: AppStatus = field(default=AppStatus.IDLE, init=False)


@dataclass(frozen=True)
class Processing:
    status: AppStatus = field(default=AppStatus.PROCESSING, init=False)


@dataclass(frozen=True)
class Success:
    result: EditResult
    status: AppStatus = field(default=AppStatus.SUCCESS, init=False)


@dataclass(frozen=True)
class Error:
    message: str
    status: AppStatus = field(default=AppStatus.ERROR, init=False)


SessionState = Idle | Processing | Success | Error
