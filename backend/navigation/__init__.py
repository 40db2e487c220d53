"""Page navigation: view state machine and navbar."""

from .controller import ViewController
from .navbar import NavBar
from .state import (
    DESIGNATED_COLORS,
    HighlightColor,
    NavigationState,
    UnknownViewError,
    View,
    initial_state,
    parse_view,
    transition,
)

__all__ = [
    "ViewController",
    "NavBar",
    "DESIGNATED_COLORS",
    "HighlightColor",
    "NavigationState",
    "UnknownViewError",
    "View",
    "initial_state",
    "parse_view",
    "transition",
]
