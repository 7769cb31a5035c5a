from todo.domain.errors import TaskValidationError
from todo.domain.task import TaskId
from datetime import date


### COMMENTS
# ==========================================================
# Warstwa wejścia (api/forms.py) — surowe pola formularza.
# ==========================================================
# - Zamienia teksty wpisane przez użytkownika na argumenty dla TaskLifecycle.
# - Sprawdza tylko obecność tytułu i format daty (YYYY-MM-DD, jak pole <input type="date">).
# - Błędy → TaskValidationError; serwis i magazyn nigdy nie walidują.


def parse_due_date(raw: str) -> date:
    """Parsuje termin w formacie YYYY-MM-DD."""
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise TaskValidationError("due_date", f"'{raw}' nie jest datą w formacie YYYY-MM-DD")


def parse_task_id(raw: str) -> TaskId:
    """Parsuje ID zadania podane w komendzie (liczba całkowita)."""
    try:
        return TaskId(int(raw))
    except ValueError:
        raise TaskValidationError("task_id", f"'{raw}' nie jest liczbą całkowitą")


def read_task_form(title: str, description: str, due: str) -> tuple[str, str, date]:
    """
        Zbiera pola formularza tworzenia zadania.

        :param title: Tytuł (wymagany, nie może być pusty).
        :param description: Opis (może być pusty).
        :param due: Termin jako tekst YYYY-MM-DD.
        :raises TaskValidationError: Gdy brak tytułu albo zły format daty.
        :return: (title, description, due_date) gotowe dla `TaskLifecycle.create`.
    """
    if not title or not title.strip():
        raise TaskValidationError("title", "Tytul nie moze byc pusty")
    return title, description, parse_due_date(due)
