"""Server-side rendering helpers for Bootstrap 5 widgets."""

from .config import WidgetSettings, apply_settings, load_widget_settings
from .exceptions import ConfigurationError
from .ids import IdGenerator, default_id_generator
from .items import Entry, Item, ItemDescriptor, Verbatim, parse_item, parse_items
from .widgets import (
    Button,
    ButtonDropdown,
    Dropdown,
    MenuRenderer,
    Nav,
    Widget,
    render_dropdown_menu,
)

__version__ = "0.1.0"

__all__ = [
    "Button",
    "ButtonDropdown",
    "ConfigurationError",
    "Dropdown",
    "Entry",
    "IdGenerator",
    "Item",
    "ItemDescriptor",
    "MenuRenderer",
    "Nav",
    "Verbatim",
    "Widget",
    "WidgetSettings",
    "apply_settings",
    "default_id_generator",
    "load_widget_settings",
    "parse_item",
    "parse_items",
    "render_dropdown_menu",
]
