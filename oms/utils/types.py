from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, FrozenSet

from oms.models.enums import Role


Clock = Callable[[], datetime]


@dataclass(frozen=True)
class Requester:
    """Caller identity handed to the service layer, which does not interpret it."""

    authorization: str
    roles: FrozenSet[Role] = field(default_factory=frozenset)
