from todo.domain.task import Task, TaskId
from typing import Iterable, Optional
import logging

logger = logging.getLogger(__name__)

### COMMENTS
# ==========================================================
# Adapter pamięciowy magazynu zadań (adapters/memory/task_store.py).
# ==========================================================
# - Dane w liście `_tasks: list[Task]` — lista, a nie słownik, bo kolejność
#   wstawiania jest kontraktem listowania.
# - Dane żyją tyle, co obiekt magazynu (brak trwałości między uruchomieniami).
# - Zasady zgodne z kontraktem portu:
#     * `insert` → dopisuje na koniec, bez sprawdzania duplikatów,
#     * `remove_by_id` → usuwa wszystkie dopasowania albo nic,
#     * `find_by_id` → pierwsze dopasowanie albo None,
#     * `replace` → podmiana w miejscu, bez zmiany pozycji,
#     * `list_all` → kopia listy (snapshot).


class InMemoryTaskStore:
    """
        Inicjalizuje magazyn z opcjonalną kolekcją startowych zadań.
        :param initial: Iterable z obiektami Task, wstawiane po kolei jak przez `insert`.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for t in (initial or []):
            self.insert(t)

    def insert(self, task: Task) -> None:
        """
            Dopisuje zadanie na koniec kolekcji.

            - Nie sprawdza duplikatów `task_id`; przy duplikatach `find_by_id`
            zwraca pierwsze dopasowanie.

            :param task: Obiekt domenowy Task do zapisania.
            :return: None
        """
        self._tasks.append(task)
        logger.debug("insert task_id=%s total=%d", task.task_id, len(self._tasks))

    def remove_by_id(self, task_id: TaskId) -> None:
        """
            Usuwa wszystkie zadania o podanym identyfikatorze.

            - Brak dopasowania nie jest błędem (no-op).

            :param task_id: Identyfikator zadania do usunięcia.
            :return: None
        """
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.task_id != task_id]
        logger.debug("remove task_id=%s removed=%d", task_id, before - len(self._tasks))

    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """
            Zwraca pierwsze zadanie o podanym `task_id` albo `None`.

            :param task_id: Identyfikator zadania do pobrania.
            :return: Obiekt `Task`, jeśli istnieje, w przeciwnym razie `None`.
        """
        for t in self._tasks:
            if t.task_id == task_id:
                return t
        return None

    def replace(self, task: Task) -> None:
        """
            Podmienia w miejscu zadania o identyfikatorze `task.task_id`.

            - Pozycja w kolekcji zostaje zachowana.
            - Brak dopasowania to no-op.

            :param task: Nowa wartość zadania.
            :return: None
        """
        self._tasks = [task if t.task_id == task.task_id else t for t in self._tasks]
        logger.debug("replace task_id=%s", task.task_id)

    def list_all(self) -> list[Task]:
        """Zwraca kopię listy zadań w kolejności wstawiania."""
        return list(self._tasks)

    def count_all(self) -> int:
        return len(self._tasks)
