### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Magazyn (TaskStore) i serwis (TaskLifecycle):
#     * nie rzucają wyjątków dla brakujących ID — brak to no-op albo None
#
# - Warstwa wejścia (api/forms.py):
#     * sprawdza obecność pól formularza i format daty, rzuca TaskValidationError
#
# - UI (CLI):
#     * łapie DomainError (lub konkretne klasy) i wyświetla przyjazny komunikat
#     * wszystko inne traktuje jako błąd techniczny


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny od błędów technicznych.
    Nie powinna być rzucana bezpośrednio — używaj klas pochodnych.
    """


class TaskValidationError(DomainError):
    """Rzucany, gdy dane z formularza nie nadają się do utworzenia zadania.
    Przykłady:
    - tytuł nie został podany,
    - termin (due_date) nie jest datą w formacie YYYY-MM-DD.
    Zawiera nazwę pola (`field`) oraz komunikat (`message`), co ułatwia prezentację w UI.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Błąd walidacji pola '{self.field}': {self.message}"
