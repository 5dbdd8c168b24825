"""Mouse event handling helpers for StaskTUI."""

from prompt_toolkit.mouse_events import MouseEventType, MouseButton


def _handle_scroll(tui, mouse_event):
    if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
        tui.move_vertical_selection(1)
        return True
    if mouse_event.event_type == MouseEventType.SCROLL_UP:
        tui.move_vertical_selection(-1)
        return True
    return False


def _handle_list_click(tui, mouse_event):
    state = tui.state
    if state.preview_visible or state.confirm_mode or not state.tasks:
        return False
    idx = state.view_offset + mouse_event.position.y
    if idx < 0 or idx >= len(state.tasks):
        return True
    state.selected_index = idx
    tui.force_render()
    return True


def handle_body_mouse(tui, mouse_event):
    """Route mouse events for the task list body."""
    if _handle_scroll(tui, mouse_event):
        return None
    if mouse_event.event_type == MouseEventType.MOUSE_UP and mouse_event.button == MouseButton.LEFT:
        if _handle_list_click(tui, mouse_event):
            return None
    return NotImplemented


__all__ = ["handle_body_mouse"]
