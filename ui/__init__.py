"""
UI Module

Terminal collaborators around the action config core.

Components:
- InteractiveConfigEditor: Menu-driven editing of the action list
- NotificationManager: Success/error alerts
- DesignSystem: Unified visual language
"""

from ui.design_system import ds, DesignSystem, ColorPalette, Spacing, BoxStyles, Icons
from ui.notifications import NotificationManager
from ui.config_editor import InteractiveConfigEditor

__all__ = [
    # Design System
    'ds',
    'DesignSystem',
    'ColorPalette',
    'Spacing',
    'BoxStyles',
    'Icons',

    # UI Components
    'InteractiveConfigEditor',
    'NotificationManager',
]
