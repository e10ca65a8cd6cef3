# tools/table_inspect.py

from rich.console import Console
from rich.table import Table as RichTable

from simulator.errors import NonDeterministic, NoStateFound
from simulator.turing_machine import is_halting


def describe_cell(table, state, symbol):
    """Compact action for one (state, symbol) pair, e.g. 'AR2'."""
    try:
        return str(table.lookup(state, symbol))
    except NoStateFound:
        return "---"
    except NonDeterministic:
        return "!!"


def _styled_cell(table, state, symbol):
    try:
        transition = table.lookup(state, symbol)
    except NoStateFound:
        return "---"
    except NonDeterministic:
        return "[red]!![/red]"
    if is_halting(transition.to_state):
        return f"[green]{transition}[/green]"
    return str(transition)


def build_table_view(table, alphabet, title="Transition Table"):
    """One row per source state, one column per symbol of the alphabet."""
    view = RichTable(title=title, show_header=True, header_style="bold magenta")
    view.add_column("State", justify="center")
    symbols = list(alphabet)
    for symbol in symbols:
        view.add_column(str(symbol.value), justify="center")

    for state in sorted({t.from_state for t in table}):
        view.add_row(str(state), *[_styled_cell(table, state, symbol) for symbol in symbols])
    return view


def print_table(table, alphabet, console=None):
    console = console or Console()
    console.print(build_table_view(table, alphabet))
