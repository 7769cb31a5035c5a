from todo.ports.task_store import TaskStore
from todo.ports.id_provider import IdProvider
from todo.domain.task import Task, TaskId
from todo.domain.enums import TaskStatus
from dataclasses import replace
from datetime import date
from typing import Optional
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_lifecycle.py) — cykl życia zadania.
# ==========================================================
# Rola:
# - Nadawanie identyfikatora przy tworzeniu (port IdProvider).
# - Jedyna operacja domenowa: oznaczenie jako zrobione (pending -> done).
# - Przekazywanie create/remove/list do magazynu.
#
# Zasady:
# - Serwis korzysta wyłącznie z portów; nie dotyka adapterów.
# - Operacje na nieistniejącym ID to ciche no-op — UI może wołać je
#   z nieaktualnym ID (np. podwójne kliknięcie "usuń").
# - Task jest frozen — zmiana = nowa instancja i `store.replace`.


class TaskLifecycle:
    """
    Operacje domenowe na zadaniach, zbudowane nad portem TaskStore.

    :param store: Implementacja portu TaskStore.
    :param ids: Implementacja portu IdProvider.
    """
    def __init__(self, store: TaskStore, ids: IdProvider) -> None:
        self.store = store
        self.ids = ids

    def create(self, title: str, description: str, due_date: date) -> Task:
        """
            Tworzy nowe zadanie i zapisuje je w magazynie.

            - `task_id` z IdProvider — unikalny wśród żywych zadań.
            - Status startowy: pending (domyślna wartość w modelu).
            - Brak walidacji poza obecnością pól (to zadanie warstwy formularza).

            :param title: Tytuł zadania.
            :param description: Opis.
            :param due_date: Termin wykonania.
            :return: Utworzony obiekt `Task`.
        """
        task = Task(task_id=self.ids.new_id(), title=title, description=description, due_date=due_date)
        self.store.insert(task)
        logger.info("created task_id=%s title=%r", task.task_id, task.title)
        return task

    def mark_done(self, task_id: TaskId) -> None:
        """
            Marks an existing task as done.

            - Missing id: silent no-op.
            - Already done: nothing changes (idempotent, done is terminal).
        """
        task = self.store.find_by_id(task_id)
        if task is None:
            logger.debug("mark_done ignored, no task_id=%s", task_id)
            return
        if task.status == TaskStatus.DONE:
            return
        self.store.replace(replace(task, status=TaskStatus.DONE))
        logger.info("task_id=%s marked done", task_id)

    def change_description(self, task_id: TaskId, description: str) -> None:
        """Ustawia nowy opis; status bez zmian. Brak zadania to no-op."""
        task = self.store.find_by_id(task_id)
        if task is None:
            logger.debug("change_description ignored, no task_id=%s", task_id)
            return
        self.store.replace(replace(task, description=description))
        logger.info("task_id=%s description changed", task_id)

    def change_due_date(self, task_id: TaskId, due_date: date) -> None:
        """Ustawia nowy termin; status bez zmian. Brak zadania to no-op."""
        task = self.store.find_by_id(task_id)
        if task is None:
            logger.debug("change_due_date ignored, no task_id=%s", task_id)
            return
        self.store.replace(replace(task, due_date=due_date))
        logger.info("task_id=%s due date changed to %s", task_id, due_date.isoformat())

    def remove(self, task_id: TaskId) -> None:
        """
            Usuwa zadanie z magazynu.

            - Deleguje do `store.remove_by_id(task_id)`; brak rekordu to no-op.
        """
        self.store.remove_by_id(task_id)
        logger.info("removed task_id=%s", task_id)

    def find(self, task_id: TaskId) -> Optional[Task]:
        return self.store.find_by_id(task_id)

    def list_all(self) -> list[Task]:
        return self.store.list_all()
