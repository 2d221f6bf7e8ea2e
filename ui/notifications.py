"""
Notification System

Alert panels shown to the operator while editing: success messages when an
action is created or a config is exported, and errors when export is
blocked by duplicate names.
"""

from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ui.design_system import ds


class NotificationManager:
    """
    Central notification system for user feedback.

    Usage:
        notifications = NotificationManager(console)
        notifications.success("Success - config exported!")
        notifications.error("Two or more actions have the same name", title="Duplicate Action Names")
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or ds.get_console()
        self.notification_history: List[Dict[str, Any]] = []

    @property
    def last(self) -> Optional[Dict[str, Any]]:
        """Most recent notification, the one an alert area would show"""
        return self.notification_history[-1] if self.notification_history else None

    def success(self, message: str, title: Optional[str] = None):
        self._show_notification(message, title or "Success", ds.icons.success, ds.colors.success, "success")

    def error(self, message: str, title: Optional[str] = None):
        self._show_notification(message, title or "Error", ds.icons.error, ds.colors.error, "error")

    def warning(self, message: str, title: Optional[str] = None):
        self._show_notification(message, title or "Warning", ds.icons.warning, ds.colors.warning, "warning")

    def info(self, message: str, title: Optional[str] = None):
        self._show_notification(message, title or "Info", ds.icons.info, ds.colors.info, "info")

    def clear(self):
        """Dismiss the current alert"""
        self.notification_history.append({
            'timestamp': datetime.now(),
            'type': None,
            'title': None,
            'message': None
        })

    def _show_notification(self, message: str, title: str, icon: str, color: str, type: str):
        """Internal method to render notification"""
        content = Text()
        content.append(f"{icon} ", style=color)
        content.append(message, style=color)

        panel = Panel(
            Align.center(content),
            title=f"[{color}]{title}[/]",
            border_style=color,
            box=ds.box_styles.minimal,
            padding=ds.spacing.padding_sm
        )

        self.console.print()
        self.console.print(panel)
        self.console.print()

        self.notification_history.append({
            'timestamp': datetime.now(),
            'type': type,
            'title': title,
            'message': message
        })
