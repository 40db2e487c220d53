"""View controller owning the navigation state of one page session."""

import logging
from typing import Optional, Union

from .state import NavigationState, UnknownViewError, View, initial_state, transition


logger = logging.getLogger(__name__)


class ViewController:
    """Holds the NavigationState and applies activation events to it."""

    def __init__(self, state: Optional[NavigationState] = None):
        self._state = state if state is not None else initial_state()
        self.last_error: Optional[UnknownViewError] = None

    @property
    def state(self) -> NavigationState:
        """The current navigation state."""
        return self._state

    @property
    def current_view(self) -> View:
        return self._state.current_view

    def activate(self, view: Union[View, str]) -> NavigationState:
        """
        Switch to `view` and return the resulting state.

        An unrecognized tag is logged, kept in `last_error`, and the
        previous state is returned unchanged.
        """
        self.last_error = None
        try:
            self._state = transition(self._state, view)
        except UnknownViewError as e:
            logger.warning("Ignoring activation: %s", e)
            self.last_error = e
        return self._state
