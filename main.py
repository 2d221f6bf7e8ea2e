#!/usr/bin/env python3
"""
Bot Action Config Editor - Main Entry Point

Usage:
    python main.py                         # Edit the example config
    python main.py --config my.json        # Edit an existing config
    python main.py --output out.json       # Write exports to a file
    python main.py --export-only           # Validate and export without editing
    python main.py --verbose               # Show debug information
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Callable, List, Optional

from rich.json import JSON

from config import Config
from logger import set_level
from action_config import ActionRegistry, ConfigExporter, Document, default_document
from ui.config_editor import InteractiveConfigEditor
from ui.design_system import ds
from ui.notifications import NotificationManager


def load_document(path: Optional[str]) -> Document:
    """Seed document from a JSON file, or the built-in example"""
    if not path:
        return default_document()
    return Document.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))


def build_sink(console, output: Optional[str]) -> Callable[[str], None]:
    """Where successful exports go: a file if given, else the console"""
    if output:
        target = Path(output)
        return lambda text: target.write_text(text + "\n", encoding="utf-8")
    # No wrapping: the printed text has to stay valid JSON
    return lambda text: console.print(JSON(text, indent=Config.EXPORT_INDENT), soft_wrap=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit and export bot action configs")
    parser.add_argument("--config", help="JSON config to start from")
    parser.add_argument("--output", default=Config.EXPORT_PATH, help="Write exported JSON here")
    parser.add_argument("--export-only", action="store_true", help="Export the config without editing")
    parser.add_argument("--verbose", action="store_true", help="Show debug information")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        Config.VERBOSE = True
        set_level("DEBUG")

    console = ds.get_console()
    # With --export-only stdout carries nothing but the artifact
    alert_console = ds.get_console(stderr=True) if args.export_only else console
    notifications = NotificationManager(alert_console)

    try:
        document = load_document(args.config)
    except (OSError, ValueError) as e:
        notifications.error(f"Could not load config: {e}")
        return 1

    registry = ActionRegistry(document, notifications=notifications)
    exporter = ConfigExporter(notifications=notifications, sink=build_sink(console, args.output))

    if args.export_only:
        try:
            result = exporter.export(registry.snapshot())
        except OSError as e:
            notifications.error(f"Could not write the exported config: {e}", title="Export Failed")
            return 1
        return 0 if result.success else 1

    editor = InteractiveConfigEditor(registry, exporter, notifications, console)
    try:
        result = editor.run()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return 130

    return 0 if result is None or result.success else 1


if __name__ == "__main__":
    sys.exit(main())
