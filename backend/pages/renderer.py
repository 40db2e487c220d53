"""HTML rendering for content views, the composed page and the document shell."""

from pathlib import Path
from typing import Any, Callable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from backend.navigation import NavBar, NavigationState, View, initial_state


def create_environment(templates_path: Path) -> Environment:
    """Create the Jinja2 environment for the site templates."""
    return Environment(
        loader=FileSystemLoader(str(templates_path)),
        autoescape=select_autoescape(["html"]),
    )


class PageRenderer:
    """Renders pages for a NavigationState."""

    def __init__(self, templates_path: Path, site_owner: str, site_title: str = ""):
        self.environment = create_environment(templates_path)
        self.site_owner = site_owner
        self.site_title = site_title or site_owner
        self.navbar = self.create_navbar()

    def create_navbar(self, on_activate: Optional[Callable[[str], Any]] = None) -> NavBar:
        """Create a navbar that reports clicks to `on_activate`."""
        return NavBar(self.environment, brand=self.site_owner, on_activate=on_activate)

    def render_content(self, view: View) -> Markup:
        """Render the static content block for `view`."""
        template = self.environment.get_template(f"pages/{view.value}.html")
        return Markup(template.render(owner=self.site_owner))

    def render_page(self, state: NavigationState) -> Markup:
        """Render the navbar plus the content of the current view."""
        template = self.environment.get_template("page.html")
        return Markup(template.render(
            navbar=self.navbar.render(state.highlights),
            content=self.render_content(state.current_view),
        ))

    def render_shell(self, state: Optional[NavigationState] = None) -> str:
        """Render the full HTML document with the page for `state` embedded."""
        if state is None:
            state = initial_state()
        template = self.environment.get_template("shell.html")
        return template.render(title=self.site_title, page=self.render_page(state))
