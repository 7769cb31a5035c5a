from typing import NewType
from datetime import date
from dataclasses import dataclass
from todo.domain.enums import TaskStatus

TaskId = NewType("TaskId", int)

@dataclass(frozen=True)
class Task():
    """
    Model domenowy pojedynczego zadania; niemutowalny; status z zamkniętego zestawu wartości;
    identyfikator nadawany przez serwis (TaskLifecycle) przy tworzeniu
    """
    task_id: TaskId
    title: str
    description: str
    due_date: date
    status: TaskStatus = TaskStatus.PENDING


### COMMENTS
# ======================================
# Własność i zmiany
# ======================================
# Task jest frozen — nikt poza magazynem (TaskStore) nie trzyma "żywej" referencji,
# przez którą mógłby obserwować późniejsze zmiany.
# Zmiana = nowa instancja (dataclasses.replace) podmieniona w magazynie przez TaskLifecycle.
#
# Status przechodzi tylko pending -> done. Usunięcie zadania to nie status,
# tylko zniknięcie encji z magazynu.
