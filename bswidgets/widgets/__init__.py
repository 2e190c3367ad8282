"""Bootstrap 5 widgets.

Each widget is an immutable builder: ``with_*`` calls return a new copy and
``render()`` returns the HTML fragment.
"""

from .base import Widget
from .button import Button
from .button_dropdown import ButtonDropdown
from .dropdown import Dropdown, MenuRenderer, render_dropdown_menu
from .nav import Nav

__all__ = [
    "Button",
    "ButtonDropdown",
    "Dropdown",
    "MenuRenderer",
    "Nav",
    "Widget",
    "render_dropdown_menu",
]
