"""Navigation state definitions and the pure view transition."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from pydantic import BaseModel


class View(str, Enum):
    """Selectable content sections of the page."""

    HOME = "home"
    CONTACT = "contact"
    PROJECTS = "projects"
    MUSIC = "music"


class HighlightColor(str, Enum):
    """Display color tokens for navbar buttons."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    PINK = "pink"
    NEUTRAL = "black"


# Color a tab carries while its view is active
DESIGNATED_COLORS: dict[View, HighlightColor] = {
    View.HOME: HighlightColor.RED,
    View.CONTACT: HighlightColor.BLUE,
    View.PROJECTS: HighlightColor.GREEN,
    View.MUSIC: HighlightColor.PINK,
}


class UnknownViewError(ValueError):
    """Raised for a tag outside the fixed set of views."""

    def __init__(self, tag: object):
        self.tag = tag
        super().__init__(f"Unrecognized view tag: {tag!r}")


def parse_view(tag: Union[View, str]) -> View:
    """Resolve an activation tag to a View."""
    if isinstance(tag, View):
        return tag
    try:
        return View(tag)
    except ValueError:
        raise UnknownViewError(tag) from None


def highlights_for(view: View) -> dict[View, HighlightColor]:
    """Build the highlight map with only `view` lit."""
    highlights = {tag: HighlightColor.NEUTRAL for tag in View}
    highlights[view] = DESIGNATED_COLORS[view]
    return highlights


class NavigationState(BaseModel):
    """
    Current view plus per-tab highlight colors.

    Highlights are derived from `current_view` on every read, so a state
    always has exactly one lit tab and callers get a read-only map.
    """

    current_view: View = View.HOME

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def highlights(self) -> Mapping[View, HighlightColor]:
        return MappingProxyType(highlights_for(self.current_view))

    def to_payload(self) -> dict:
        """Plain-string form for JSON transmission."""
        return {
            "current_view": self.current_view.value,
            "highlights": {
                view.value: color.value for view, color in self.highlights.items()
            },
        }


def initial_state() -> NavigationState:
    """State at the start of a page session."""
    return NavigationState()


def transition(state: NavigationState, tag: Union[View, str]) -> NavigationState:
    """
    Compute the state that follows activating `tag`.

    Every tab is reset to neutral and then the activated tab gets its
    designated color. `state` is never modified; an unknown tag raises
    UnknownViewError before anything is built.
    """
    view = parse_view(tag)
    return NavigationState(current_view=view)
