"""prompt_toolkit controls used by StaskTUI."""

from typing import Callable, Optional

from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent

MouseCallback = Callable[[MouseEvent], object]


class TaskListControl(FormattedTextControl):
    """Non-focusable text control that routes mouse events to the TUI first.

    The callback returns ``NotImplemented`` for events it does not consume;
    those fall through to the default FormattedTextControl handling.
    """

    def __init__(self, text, on_mouse: Optional[MouseCallback] = None):
        super().__init__(text, focusable=False, show_cursor=False)
        self.on_mouse = on_mouse

    def mouse_handler(self, mouse_event: MouseEvent):
        if self.on_mouse is not None:
            handled = self.on_mouse(mouse_event)
            if handled is not NotImplemented:
                return handled
        return super().mouse_handler(mouse_event)
