from decimal import Decimal

import pytest

from stockroom.console import ConsolePrompter
from stockroom.menu import StockManagementSystem
from stockroom.schemas import Electronics, Product
from stockroom.store import InventoryStore


class ScriptedConsole:
    """Feeds canned input lines and records everything shown to the user."""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.output = []

    def input(self, prompt=""):
        self.output.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def print(self, *args, **kwargs):
        self.output.append(" ".join(str(arg) for arg in args))

    @property
    def text(self):
        return "\n".join(self.output)

    def prompter(self):
        return ConsolePrompter(input_func=self.input, print_func=self.print)


@pytest.fixture
def store():
    """Empty store."""
    return InventoryStore()


@pytest.fixture
def seeded_store():
    """Store holding one general product and one electronics product."""
    s = InventoryStore()
    s.add(Product(id=1, name="Widget", quantity=10, price=Decimal("2.50")))
    s.add(Electronics(id=2, name="TV", quantity=3, price=Decimal("500"), warranty="1 year"))
    return s


@pytest.fixture
def make_console():
    return ScriptedConsole


@pytest.fixture
def run_session():
    """Runs a full menu session over scripted input; returns (system, console)."""

    def _run(lines, store=None, variant="full"):
        console = ScriptedConsole(lines)
        system = StockManagementSystem(
            store=store, prompter=console.prompter(), variant=variant
        )
        system.run()
        return system, console

    return _run
