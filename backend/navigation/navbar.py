"""Top navigation bar."""

from typing import Any, Callable, Mapping, Optional

from jinja2 import Environment
from markupsafe import Markup

from .state import HighlightColor, View


# Button labels for the right-hand group; the home button shows the owner's name
TAB_LABELS: dict[View, str] = {
    View.CONTACT: "Contact",
    View.PROJECTS: "Projects",
    View.MUSIC: "Music",
}


class NavBar:
    """Stateless navbar: renders one button per view and forwards clicks."""

    def __init__(
        self,
        environment: Environment,
        brand: str,
        on_activate: Optional[Callable[[str], Any]] = None,
    ):
        self.environment = environment
        self.brand = brand
        self.on_activate = on_activate

    def render(self, highlights: Mapping[View, HighlightColor]) -> Markup:
        """Render the navbar with each button colored from `highlights`."""
        template = self.environment.get_template("navbar.html")
        tabs = [
            {"name": view.value, "label": label, "color": highlights[view].value}
            for view, label in TAB_LABELS.items()
        ]
        return Markup(template.render(
            brand=self.brand,
            home={"name": View.HOME.value, "color": highlights[View.HOME].value},
            tabs=tabs,
        ))

    def handle_click(self, tag: str) -> Any:
        """Report the activated button's tag to the owner."""
        return self.on_activate(tag)
