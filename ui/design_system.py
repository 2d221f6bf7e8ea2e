"""
UI Design System - Unified Visual Language
==========================================

Colors, icons, box styles and spacing shared by the editor's terminal
components, plus a themed Rich console factory.
"""

from dataclasses import dataclass
from rich.console import Console
from rich.theme import Theme
from rich import box


# ═══════════════════════════════════════════════════════════════════
# COLOR PALETTE
# ═══════════════════════════════════════════════════════════════════

@dataclass
class ColorPalette:
    """Terminal-safe palette used by every editor panel"""

    primary: str = "#6366F1"  # Indigo, the export button color

    accent_teal: str = "#2DD4BF"
    accent_amber: str = "#FBBF24"
    accent_purple: str = "#A78BFA"

    success: str = "#10B981"
    warning: str = "#F59E0B"
    error: str = "#EF4444"
    info: str = "#3B82F6"

    text_primary: str = "#F0F6FC"
    text_secondary: str = "#B1BAC4"
    text_tertiary: str = "#7D8590"

    border: str = "#30363D"


# ═══════════════════════════════════════════════════════════════════
# SPACING & BOXES
# ═══════════════════════════════════════════════════════════════════

@dataclass
class Spacing:
    """Padding tuples (vertical, horizontal)"""

    padding_sm: tuple = (0, 1)


class BoxStyles:
    """Pre-configured box styles for different UI elements"""

    minimal = box.MINIMAL
    table_default = box.ROUNDED


# ═══════════════════════════════════════════════════════════════════
# ICONS
# ═══════════════════════════════════════════════════════════════════

class Icons:
    """Unicode icons for consistent visual language"""

    # Status
    success = "✓"
    error = "✗"
    warning = "⚠"
    info = "ℹ"

    # Editing
    edit = "✎"
    chevron_right = "›"
    bullet = "•"

    # Action kinds
    accept = "🟢"
    reject = "🔴"
    instruction = "💬"


# ═══════════════════════════════════════════════════════════════════
# RICH THEME
# ═══════════════════════════════════════════════════════════════════

def create_rich_theme() -> Theme:
    """Create Rich library theme with our design system"""

    palette = ColorPalette()

    return Theme({
        "success": f"bold {palette.success}",
        "warning": f"bold {palette.warning}",
        "error": f"bold {palette.error}",
        "info": f"bold {palette.info}",
        "primary": f"bold {palette.primary}",
        "muted": f"dim {palette.text_tertiary}",
        "table.header": f"bold {palette.text_primary}",
    })


class DesignSystem:
    """
    Main design system class.

    Usage:
        from ui.design_system import ds

        console.print(f"[{ds.colors.success}]Success![/]")
    """

    def __init__(self):
        self.colors = ColorPalette()
        self.spacing = Spacing()
        self.box_styles = BoxStyles()
        self.icons = Icons()
        self.theme = create_rich_theme()

    def get_console(self, **kwargs) -> Console:
        """Get a Console instance with our theme applied"""
        return Console(theme=self.theme, **kwargs)

    def kind_icon(self, kind) -> str:
        icon_map = {
            "AcceptOffer": self.icons.accept,
            "RejectOffer": self.icons.reject,
            "SubmitBotInstruction": self.icons.instruction,
        }
        return icon_map.get(getattr(kind, "value", kind), self.icons.bullet)


# Global instance
ds = DesignSystem()
