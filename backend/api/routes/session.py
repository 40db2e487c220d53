"""Page session routes: WebSocket channel carrying navbar activations."""

import logging
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from backend.navigation import NavigationState, ViewController
from backend.pages import PageRenderer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


class ActivationMessage(BaseModel):
    """Inbound activation event."""

    view: str


class StateEvent(BaseModel):
    """Outbound state update."""

    type: str = "state"
    state: dict
    html: str
    error: Optional[str] = None


def _state_event(
    renderer: PageRenderer, state: NavigationState, error: Optional[str] = None
) -> dict:
    """Build the event sent after each activation."""
    event = StateEvent(
        type="error" if error else "state",
        state=state.to_payload(),
        html=str(renderer.render_page(state)),
        error=error,
    )
    return event.model_dump(exclude_none=True)


@router.websocket("/ws")
async def websocket_session(websocket: WebSocket):
    """
    WebSocket endpoint for one page session.

    The connection owns a fresh ViewController. Each `{"view": tag}`
    message is forwarded through the navbar and answered with the
    resulting state and re-rendered page.
    """
    await websocket.accept()

    renderer: PageRenderer = websocket.app.state.renderer
    controller = ViewController()
    navbar = renderer.create_navbar(on_activate=controller.activate)
    logger.debug("Page session opened")

    await websocket.send_json(_state_event(renderer, controller.state))

    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000))

            try:
                if frame.get("text") is None:
                    raise ValueError("expected a text frame")
                message = ActivationMessage.model_validate_json(frame["text"])
            except ValueError as e:  # includes pydantic ValidationError
                logger.warning("Malformed session message: %s", e)
                await websocket.send_json(
                    _state_event(renderer, controller.state, error="Malformed message")
                )
                continue

            state = navbar.handle_click(message.view)
            error = str(controller.last_error) if controller.last_error else None

            await websocket.send_json(_state_event(renderer, state, error=error))

    except WebSocketDisconnect:
        logger.debug("Page session closed")
