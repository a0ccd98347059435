import logging
from typing import Optional

from . import settings
from .console import ConsolePrompter
from .exceptions import DUPLICATE_ID_MESSAGE, NOT_FOUND_MESSAGE, StockError
from .schemas import Electronics, Product
from .store import InventoryStore, display

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice: "


class StockManagementSystem:
    """
    Console front end for an InventoryStore.

    Each pass of `run` shows the menu, reads a choice and dispatches to one
    action; the loop ends when the Exit action clears `running`.
    """

    def __init__(
        self,
        store: Optional[InventoryStore] = None,
        prompter: Optional[ConsolePrompter] = None,
        variant: Optional[str] = None,
    ):
        self.store = store if store is not None else InventoryStore()
        self.prompter = prompter or ConsolePrompter()
        self.variant = variant or settings.MENU_VARIANT
        if self.variant not in settings.MENU_VARIANTS:
            raise ValueError(f"Unknown menu variant: {self.variant!r}")
        self.running = False

        # --- Menu Registry ---
        # Position in the list is the number the user types.
        self.menu_registry = [
            {"label": "Add General Product", "action": self.add_general_product},
            {"label": "Add Electronics Product", "action": self.add_electronics_product},
            {"label": "View All Products", "action": self.view_all_products},
        ]
        if self.variant == "full":
            self.menu_registry += [
                {"label": "Update Product", "action": self.update_product},
                {"label": "Delete Product", "action": self.delete_product},
            ]
        self.menu_registry.append({"label": "Exit", "action": self.exit})

    def say(self, message: str = "") -> None:
        self.prompter.say(message)

    # --- Main Loop ---

    def run(self) -> None:
        logger.info(f"Session started ({self.variant} menu).")
        self.running = True
        try:
            while self.running:
                self.display_menu()
                self.dispatch(self.prompter.read_choice(CHOICE_PROMPT))
                self.say()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed; ending session.")
            self.say()
            self.exit()
        logger.info(f"Session ended with {len(self.store)} product(s) in stock.")

    def display_menu(self) -> None:
        self.say("--- Stock Management System ---")
        for number, entry in enumerate(self.menu_registry, start=1):
            self.say(f"{number}. {entry['label']}")

    def dispatch(self, choice: int) -> None:
        if not 1 <= choice <= len(self.menu_registry):
            self.say(
                f"Invalid choice. Please enter a number between 1 and {len(self.menu_registry)}."
            )
            return
        entry = self.menu_registry[choice - 1]
        logger.debug(f"Menu choice {choice}: {entry['label']}")
        entry["action"]()

    def exit(self) -> None:
        self.say("Exiting Stock Management System. Goodbye!")
        self.running = False

    # --- Add ---

    def add_general_product(self) -> None:
        self.say("\n--- Add General Product ---")
        product_id = self._read_unique_id()
        name = self.prompter.read_text("Enter Product Name: ")
        quantity = self.prompter.read_int("Enter Quantity: ")
        price = self.prompter.read_decimal("Enter Price: ")

        self.store.add(Product(id=product_id, name=name, quantity=quantity, price=price))
        self.say(f"General Product '{name}' added successfully!")

    def add_electronics_product(self) -> None:
        self.say("\n--- Add Electronics Product ---")
        product_id = self._read_unique_id()
        name = self.prompter.read_text("Enter Product Name: ")
        quantity = self.prompter.read_int("Enter Quantity: ")
        price = self.prompter.read_decimal("Enter Price: ")
        warranty = self.prompter.read_text(
            "Enter Warranty Period (e.g., 1 year, 6 months): "
        )

        self.store.add(
            Electronics(
                id=product_id, name=name, quantity=quantity, price=price, warranty=warranty
            )
        )
        self.say(f"Electronics Product '{name}' added successfully!")

    def _read_unique_id(self) -> int:
        while True:
            product_id = self.prompter.read_int("Enter Product ID: ")
            if product_id not in self.store:
                return product_id
            self.say(DUPLICATE_ID_MESSAGE.format(product_id=product_id))

    # --- View ---

    def view_all_products(self) -> None:
        listing = self.store.list_all()
        if not listing:
            self.say("No products available in the system.")
            return

        self.say("\n--- Product List ---")
        for record in listing:
            self.say(display(record))
            self.say(settings.LIST_DIVIDER)

    # --- Update ---

    def update_product(self) -> None:
        self.say("\n--- Update Product ---")
        if self.store.is_empty():
            self.say("No products to update.")
            return

        product_id = self.prompter.read_int("Enter the ID of the product to update: ")
        record = self.store.find_by_id(product_id)
        if record is None:
            self.say(NOT_FOUND_MESSAGE.format(product_id=product_id))
            return

        self.say(f"Current details for product ID {product_id}:")
        self.say(display(record))

        self.say("\nWhat do you want to update?")
        self.say("1. Quantity")
        self.say("2. Price")
        update_choice = self.prompter.read_choice(CHOICE_PROMPT)

        try:
            if update_choice == 1:
                quantity = self.prompter.read_int("Enter new Quantity: ")
                self.store.update_quantity(product_id, quantity)
                self.say(f"Quantity updated for product '{record.name}'.")
            elif update_choice == 2:
                price = self.prompter.read_decimal("Enter new Price: ")
                self.store.update_price(product_id, price)
                self.say(f"Price updated for product '{record.name}'.")
            else:
                self.say("Invalid update choice. No changes made.")
        except StockError as e:
            self.say(e.message)

    # --- Delete ---

    def delete_product(self) -> None:
        self.say("\n--- Delete Product ---")
        if self.store.is_empty():
            self.say("No products to delete.")
            return

        product_id = self.prompter.read_int("Enter the ID of the product to delete: ")
        try:
            removed = self.store.remove(product_id)
        except StockError as e:
            self.say(e.message)
            return
        self.say(f"Product '{removed.name}' (ID: {product_id}) deleted successfully!")
