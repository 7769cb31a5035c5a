from typing import Protocol, Optional
from todo.domain.task import Task, TaskId


### COMMENTS
# ==========================================================
# Kontrakt magazynu zadań (ports/task_store.py).
# ==========================================================
# - Magazyn trzyma autorytatywną, uporządkowaną kolekcję Tasków.
# - Brak logiki biznesowej (nadawanie ID, statusy — to TaskLifecycle).
# - Brak wyjątków: nieobecność sygnalizowana przez None albo no-op.
# - Kolejność listowania = kolejność wstawiania (bez sortowania).


class TaskStore(Protocol):
    """Interfejs magazynu obiektów `Task`."""

    def insert(self, task: Task) -> None:
        """Dopisuje zadanie na koniec kolekcji.

        Uwagi:
            Magazyn nie sprawdza duplikatów `task_id` — to odpowiedzialność wołającego.
        """

    def remove_by_id(self, task_id: TaskId) -> None:
        """Usuwa wszystkie zadania o podanym `task_id`.

        Brak dopasowania to no-op, nie błąd.
        """

    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Zwraca pierwsze zadanie o podanym `task_id` albo `None`."""

    def replace(self, task: Task) -> None:
        """Podmienia w miejscu zadania o `task.task_id` na nową wartość.

        Pozycja w kolekcji zostaje zachowana. Brak dopasowania to no-op.
        """

    def list_all(self) -> list[Task]:
        """Zwraca nową listę wszystkich zadań w kolejności wstawiania.

        Zmiany w zwróconej liście nie wpływają na magazyn.
        """

    def count_all(self) -> int:
        """Zwraca liczbę przechowywanych zadań."""
