from todo.ports.id_provider import IdProvider
from todo.domain.task import TaskId
import itertools

class CounterIdProvider(IdProvider):
    """Monotoniczny licznik w obrębie procesu; ID nie są używane ponownie po usunięciu zadania."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def new_id(self) -> TaskId:
        return TaskId(next(self._counter))
