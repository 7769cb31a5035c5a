from todo.domain.errors import TaskValidationError, DomainError
from todo.domain.task import Task
from todo.domain.enums import TaskStatus
from todo.services.task_lifecycle import TaskLifecycle
from todo.adapters.memory.task_store import InMemoryTaskStore
from todo.adapters.system.id_provider_counter import CounterIdProvider
from todo.api.forms import read_task_form, parse_task_id, parse_due_date
from todo.api.colors import TaskColor
from todo.logging_setup import setup_logging
from typer import Context, Option, Typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from datetime import date
import logging
import shlex


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) — warstwa prezentacji dla listy zadań.
# ==========================================================
# Rola:
# - Zbiera pola formularza (tytuł, opis, termin) i woła TaskLifecycle.create.
# - Renderuje tabelę zadań po każdej zmianie (done/rm/add/edit).
# - Łapie DomainError i drukuje przyjazne komunikaty.
#
# Zasady:
# - Zero logiki biznesowej — deleguj do TaskLifecycle.
# - Zależności (magazyn + ID + serwis) budowane w callbacku i trzymane w `ctx.obj`,
#   bez globalnego singletonu w module.
# - Dane żyją tyle, co proces: `shell` to jedna sesja, `demo` to scenariusz w jednym procesie.


app = Typer(help="To-do list (in-memory)")
console = Console()

SHELL_HELP = (
    "[bold]add[/]            — nowe zadanie (formularz: tytuł, opis, termin)\n"
    "[bold]list[/]           — lista zadań\n"
    "[bold]done[/] <id>      — oznacz jako zrobione\n"
    "[bold]rm[/] <id>        — usuń zadanie\n"
    "[bold]show[/] <id>      — szczegóły zadania\n"
    "[bold]edit[/] <id>      — zmień opis / termin\n"
    "[bold]help[/]           — ta pomoc\n"
    "[bold]quit[/]           — koniec sesji"
)


def build_lifecycle(first_id: int = 1) -> TaskLifecycle:
    """Tworzy serwis na magazynie w pamięci i liczniku ID."""
    return TaskLifecycle(InMemoryTaskStore(), CounterIdProvider(start=first_id))


@app.callback()
def main(
    ctx: Context,
    verbose: bool = Option(False, "--verbose", "-v", help="Logi DEBUG na stderr"),
    first_id: int = Option(1, "--first-id", min=1, help="Pierwsze nadawane ID zadania"),
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = build_lifecycle(first_id)


def format_due(due: date) -> str:
    return due.strftime("%d %B %Y")


def color_status(status: TaskStatus) -> str:
    """Zwraca status w Rich-markup z kolorem."""
    match status:
        case TaskStatus.PENDING:
            return f"{TaskColor.YELLOW}pending{TaskColor.RESET}"
        case TaskStatus.DONE:
            return f"{TaskColor.GREEN}done{TaskColor.RESET}"
        case _:
            return str(status)


def render_list(items: list[Task]) -> None:
    """Renderuje tabelę Rich z kolumnami: ID, Title, Description, Due, Status."""

    table = Table(show_lines=True, header_style="bold")
    table.add_column("ID", no_wrap=True, style="cyan")
    table.add_column("Title")
    table.add_column("Description")
    table.add_column("Due", no_wrap=True, style="dim")
    table.add_column("Status", no_wrap=True)

    for t in items:
        table.add_row(
            str(t.task_id),
            escape(t.title),
            escape(t.description),
            format_due(t.due_date),
            color_status(t.status),
        )

    console.print(table)
    console.print(f"[dim]Razem: {len(items)}[/dim]")


def render_task(task: Task) -> None:
    lines = [
        f"ID: {task.task_id}",
        f"Title: {escape(task.title)}",
        f"Description: {escape(task.description) or '[dim]brak[/]'}",
        f"Due: {format_due(task.due_date)}",
        f"Status: {color_status(task.status)}",
    ]
    console.print(Panel.fit("\n".join(lines), title="Szczegóły zadania", border_style="cyan"))


def error_panel(e: DomainError) -> None:
    if isinstance(e, TaskValidationError):
        console.print(Panel.fit(
            f"❌ {escape(str(e))}\n[dim]Wpisz 'help', żeby zobaczyć dostępne komendy[/]",
            title="Błąd walidacji",
            border_style="red",
        ))
        return
    console.print(Panel.fit(
        f"❌ {escape(str(e))}",
        title="Błąd domenowy",
        border_style="red",
    ))


def require_id(args: list[str]):
    if not args:
        raise TaskValidationError("task_id", "Podaj ID zadania, np. 'done 1'")
    return parse_task_id(args[0])


def add_from_form(lifecycle: TaskLifecycle) -> None:
    """
    Formularz tworzenia zadania.

    Flow:
    - Pytania o tytuł, opis i termin.
    - read_task_form → lifecycle.create → Panel „✅ Dodano zadanie” + tabela.
    - Błąd walidacji: TaskValidationError leci do pętli sesji.
    """
    title = console.input("Tytuł: ")
    description = console.input("Opis: ")
    due = console.input("Termin (YYYY-MM-DD): ")

    task = lifecycle.create(*read_task_form(title, description, due))
    console.print(Panel.fit(
        f"✅ Dodano zadanie\n"
        f"[cyan]ID:[/cyan] {task.task_id}\n"
        f"[dim]Title:[/dim] {escape(task.title)}",
        title="Sukces",
        border_style="green",
    ))
    render_list(lifecycle.list_all())


def edit_from_form(lifecycle: TaskLifecycle, args: list[str]) -> None:
    """
    Zmiana opisu i/lub terminu. Pusta odpowiedź = bez zmian.
    Termin jest parsowany przed jakąkolwiek zmianą, więc błąd nie zostawia połowicznej edycji.
    """
    task_id = require_id(args)
    description = console.input("Nowy opis (Enter = bez zmian): ")
    due = console.input("Nowy termin YYYY-MM-DD (Enter = bez zmian): ")

    due_date = parse_due_date(due) if due.strip() else None
    if description:
        lifecycle.change_description(task_id, description)
    if due_date is not None:
        lifecycle.change_due_date(task_id, due_date)
    render_list(lifecycle.list_all())


def run_shell_command(lifecycle: TaskLifecycle, cmd: str, args: list[str]) -> None:
    """Wykonuje jedną komendę sesji; błędy domenowe obsługuje wołający."""
    match cmd:
        case "add":
            add_from_form(lifecycle)
        case "list":
            render_list(lifecycle.list_all())
        case "done":
            lifecycle.mark_done(require_id(args))
            render_list(lifecycle.list_all())
        case "rm":
            lifecycle.remove(require_id(args))
            render_list(lifecycle.list_all())
        case "show":
            task_id = require_id(args)
            task = lifecycle.find(task_id)
            if task is None:
                console.print(Panel.fit(
                    f"❌ Nie znaleziono zadania o ID: {task_id}\n"
                    f"[dim]Użyj 'list', żeby znaleźć poprawne ID[/]",
                    title="Nie znaleziono",
                    border_style="red",
                ))
            else:
                render_task(task)
        case "edit":
            edit_from_form(lifecycle, args)
        case "help":
            console.print(Panel.fit(SHELL_HELP, title="Komendy", border_style="cyan"))
        case _:
            raise TaskValidationError("command", f"Nieznana komenda: {cmd}")


@app.command("shell")
def shell(ctx: Context) -> None:
    """
    Interaktywna sesja: lista zadań żyje do wyjścia z sesji ('quit' albo EOF).
    """
    lifecycle: TaskLifecycle = ctx.obj
    console.print(Panel.fit("📝 Lista zadań — wpisz 'help', żeby zobaczyć komendy", border_style="cyan"))
    render_list(lifecycle.list_all())

    while True:
        try:
            line = console.input("[bold cyan]todo>[/] ")
        except EOFError:
            break
        try:
            parts = shlex.split(line)
        except ValueError as e:
            error_panel(TaskValidationError("command", str(e)))
            continue
        if not parts:
            continue
        cmd, args = parts[0], parts[1:]
        if cmd in ("quit", "exit"):
            break
        try:
            run_shell_command(lifecycle, cmd, args)
        except DomainError as e:
            error_panel(e)

    console.print(Panel.fit("👋 Koniec sesji", border_style="cyan"))


@app.command("demo")
def demo(ctx: Context) -> None:
    """
    Pokazowy przebieg działania aplikacji w jednym procesie.

    - Tworzy 2 zadania.
    - Oznacza pierwsze jako zrobione.
    - Usuwa drugie.
    - Pokazuje listę po każdym kroku.
    """
    lifecycle: TaskLifecycle = ctx.obj

    console.print(Panel.fit("🚀 Start demonstracji", border_style="cyan"))

    a = lifecycle.create("Buy milk", "2% fat", date(2024, 1, 10))
    b = lifecycle.create("Pay rent", "", date(2024, 1, 5))
    console.print("\n📋 Lista po utworzeniu:")
    render_list(lifecycle.list_all())

    lifecycle.mark_done(a.task_id)
    console.print(Panel.fit(f"✔️ Zrobione: {a.task_id} ({a.title})", border_style="green"))
    render_list(lifecycle.list_all())

    lifecycle.remove(b.task_id)
    console.print(Panel.fit(f"🗑️ Usunięto zadanie: {b.task_id} ({b.title})", border_style="red"))
    render_list(lifecycle.list_all())

    console.print(Panel.fit("🏁 Demo zakończone", border_style="cyan"))


if __name__ == "__main__":
    app()
