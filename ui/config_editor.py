"""
Interactive Config Editor

Terminal front end for an ActionRegistry. Lists the current actions and lets
the operator add, edit, remove and export them.

The editor never touches the action list directly; every change goes
through the registry and every export through the ConfigExporter.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from action_config import ActionKind, ActionRegistry, ConfigExporter, ExportResult
from ui.design_system import ds
from ui.notifications import NotificationManager
from logger import get_logger

logger = get_logger(__name__)

# Menu number -> kind, in picker order
KIND_CHOICES = {
    "1": ActionKind.ACCEPT_OFFER,
    "2": ActionKind.REJECT_OFFER,
    "3": ActionKind.SUBMIT_BOT_INSTRUCTION,
}


class InteractiveConfigEditor:
    """
    Menu-driven editor for one config document.

    Main loop:
    1. Show the action list (duplicates highlighted)
    2. Ask for a command: add, edit, remove, export, quit
    3. Apply it through the registry / exporter
    """

    def __init__(
        self,
        registry: ActionRegistry,
        exporter: ConfigExporter,
        notifications: Optional[NotificationManager] = None,
        console: Optional[Console] = None
    ):
        self.registry = registry
        self.exporter = exporter
        self.notifications = notifications
        self.console = console or ds.get_console()
        self.last_export: Optional[ExportResult] = None

    def run(self) -> Optional[ExportResult]:
        """Run until the operator quits. Returns the last export attempt, if any."""
        handlers = {
            "a": self.add_action,
            "e": self.edit_action,
            "r": self.remove_action,
            "x": self.export,
        }

        while True:
            self.show_actions()
            choice = Prompt.ask(
                f"\n[bold {ds.colors.primary}]{ds.icons.chevron_right} "
                f"(a)dd, (e)dit, (r)emove, e(x)port, (q)uit[/]",
                choices=["a", "e", "r", "x", "q"],
                default="x",
                console=self.console
            )
            logger.debug(f"Editor command: {choice}")
            if choice == "q":
                return self.last_export
            handlers[choice]()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_action(self):
        kind = self._ask_kind("New action type")
        self.registry.add(kind)
        index = len(self.registry) - 1

        self.registry.rename(index, Prompt.ask(
            f"[{ds.colors.accent_amber}]Action name[/]", default="", console=self.console
        ))
        if kind == ActionKind.SUBMIT_BOT_INSTRUCTION:
            self._ask_instruction(index)

    def edit_action(self):
        index = self._ask_index("Edit which action?")
        if index is None:
            return

        action = self.registry.get(index)
        choices = ["n", "t"]
        hint = "(n)ame, (t)ype"
        if action.takes_instruction:
            choices.append("i")
            hint += ", (i)nstruction"

        field = Prompt.ask(
            f"[{ds.colors.accent_amber}]{ds.icons.edit} Change {hint}[/]",
            choices=choices,
            console=self.console
        )

        if field == "n":
            self.registry.rename(index, Prompt.ask(
                f"[{ds.colors.accent_amber}]New name[/]", default=action.name, console=self.console
            ))
        elif field == "t":
            self.registry.change_kind(index, self._ask_kind("New action type"))
        else:
            self._ask_instruction(index)

    def remove_action(self):
        index = self._ask_index("Remove which action?")
        if index is not None:
            self.registry.remove(index)

    def export(self) -> Optional[ExportResult]:
        """Export the current list. A failed write is reported and the session goes on."""
        try:
            self.last_export = self.exporter.export(self.registry.snapshot())
        except OSError as e:
            logger.error(f"Export write failed: {e}")
            message = f"Could not write the exported config: {e}"
            if self.notifications:
                self.notifications.error(message, title="Export Failed")
            else:
                self.console.print(f"[{ds.colors.error}]{ds.icons.error} {message}[/]")
            return None
        return self.last_export

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def show_actions(self):
        """Show the document header and its action table"""
        duplicates = self.registry.duplicate_names()

        header = Text()
        header.append(f"{self.registry.name} ", style=f"bold {ds.colors.primary}")
        header.append(f"v{self.registry.version}", style=ds.colors.text_tertiary)
        self.console.rule(header, style=ds.colors.primary)

        table = Table(
            show_header=True,
            header_style=f"bold {ds.colors.text_primary}",
            border_style=ds.colors.border,
            box=ds.box_styles.table_default,
            padding=(0, 1)
        )
        table.add_column("#", justify="right", style=ds.colors.text_tertiary)
        table.add_column("Name", style=f"bold {ds.colors.accent_purple}")
        table.add_column("Type")
        table.add_column("Instruction", style=ds.colors.text_secondary)

        for position, action in enumerate(self.registry.actions, 1):
            name = Text(action.name or "(unnamed)")
            if action.name in duplicates:
                name.stylize(f"bold {ds.colors.error}")
            elif not action.name:
                name.stylize(f"dim {ds.colors.text_tertiary}")

            instruction = (action.instruction or "") if action.takes_instruction else ""
            table.add_row(
                str(position),
                name,
                f"{ds.kind_icon(action.kind)} {action.kind.label}",
                instruction
            )

        self.console.print(table)

        if duplicates:
            warning = Text()
            warning.append(f"{ds.icons.warning} Duplicate names: ", style=ds.colors.warning)
            warning.append(", ".join(sorted(duplicates)), style=f"bold {ds.colors.warning}")
            self.console.print(Panel(warning, border_style=ds.colors.warning, box=ds.box_styles.minimal))

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def _ask_kind(self, prompt: str) -> ActionKind:
        for number, kind in KIND_CHOICES.items():
            self.console.print(f"  [{ds.colors.accent_teal}]{number}[/] {ds.kind_icon(kind)} {kind.label}")

        choice = Prompt.ask(
            f"[{ds.colors.accent_amber}]{prompt}[/]",
            choices=list(KIND_CHOICES),
            console=self.console
        )
        return KIND_CHOICES[choice]

    def _ask_instruction(self, index: int):
        current = self.registry.get(index).instruction or ""
        self.registry.set_instruction(index, Prompt.ask(
            f"[{ds.colors.accent_amber}]Instruction[/]", default=current, console=self.console
        ))

    def _ask_index(self, prompt: str) -> Optional[int]:
        """Ask for a 1-based position; None if it does not exist"""
        if not len(self.registry):
            self._warn("There are no actions yet")
            return None

        answer = Prompt.ask(
            f"[{ds.colors.accent_amber}]{prompt}[/] (1-{len(self.registry)})",
            console=self.console
        )
        try:
            index = int(answer) - 1
        except ValueError:
            index = -1

        if not 0 <= index < len(self.registry):
            self._warn(f"'{answer}' is not an action number")
            return None
        return index

    def _warn(self, message: str):
        if self.notifications:
            self.notifications.warning(message)
        else:
            self.console.print(f"[{ds.colors.warning}]{ds.icons.warning} {message}[/]")
