from typing import Protocol
from todo.domain.task import TaskId

class IdProvider(Protocol):
    """Port odpowiedzialny za generowanie unikalnych identyfikatorów zadań."""
    def new_id(self) -> TaskId:
        pass
