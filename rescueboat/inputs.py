"""Keyboard and mouse state, fed by window events and queried each frame."""

from __future__ import annotations

from enum import Enum
from typing import Union

_LEFT_BIT = 0x0001
_RIGHT_BIT = 0x0002
_MIDDLE_BIT = 0x0010


class MouseButton(Enum):
    """The three mouse buttons."""

    L = "L"
    R = "R"
    M = "M"


Key = Union[str, int]


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key must be a single character, got {key!r}")
        return ord(key.upper())
    if isinstance(key, int):
        return key
    raise TypeError(f"unsupported key type: {type(key).__name__}")


def _half(value: int) -> int:
    return int(value / 2)


class InputManager:
    """Tracks pressed keys, mouse buttons, wheel and window state."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self._down = {button: False for button in MouseButton}
        self._prev_down = {button: False for button in MouseButton}
        self.mouse_pos = (0, 0)
        self.prev_mouse_pos = (0, 0)
        self.last_move_pos = (0, 0)
        self.scroll_wheel_delta = 0.0
        self.require_focus = True
        self.window_focused = False
        self.captured = False
        self._rect = (0, 0, 0, 0)

    # --- frame bookkeeping ---------------------------------------------

    def update_focus(self, focused: bool) -> None:
        """Record whether the window currently has focus."""
        self.window_focused = bool(focused)

    def update_states(self) -> None:
        """Carry button states over to the next frame and clear the wheel."""
        self._prev_down = dict(self._down)
        self.scroll_wheel_delta = 0.0

    def update_mouse_pos(self, x: int, y: int) -> None:
        """Store the cursor position for this frame."""
        self.prev_mouse_pos = self.mouse_pos
        self.mouse_pos = (x, y)

    @property
    def mouse_x(self) -> int:
        return self.mouse_pos[0]

    @property
    def mouse_y(self) -> int:
        return self.mouse_pos[1]

    # --- focus ----------------------------------------------------------

    def set_window_focus_requirement(self, required: bool) -> None:
        """Choose whether input is only seen while the window has focus."""
        self.require_focus = bool(required)

    def is_window_focused(self) -> bool:
        """Window focus; always true when focus is not required."""
        if self.require_focus:
            return self.window_focused
        return True

    def _blocked(self) -> bool:
        return self.require_focus and not self.window_focused

    # --- window events --------------------------------------------------

    def on_mouse_down(self, button_state: int, x: int, y: int) -> None:
        """A mouse button was pressed; the first flagged button counts."""
        if button_state & _LEFT_BIT:
            self._down[MouseButton.L] = True
        elif button_state & _RIGHT_BIT:
            self._down[MouseButton.R] = True
        elif button_state & _MIDDLE_BIT:
            self._down[MouseButton.M] = True
        self.captured = True

    def on_mouse_up(self, button_state: int, x: int, y: int, button: int) -> None:
        """A mouse button was released; ``button`` carries its flag."""
        if button & _LEFT_BIT:
            self._down[MouseButton.L] = False
        elif button & _RIGHT_BIT:
            self._down[MouseButton.R] = False
        elif button & _MIDDLE_BIT:
            self._down[MouseButton.M] = False
        self.captured = False

    def on_mouse_move(self, button_state: int, x: int, y: int) -> None:
        """Remember where the last move event happened.

        The frame's cursor position is still polled via ``update_mouse_pos``.
        """
        self.last_move_pos = (x, y)

    def on_mouse_wheel(self, wheel_delta: float, x: int, y: int) -> None:
        """Store the wheel movement for this frame."""
        self.scroll_wheel_delta = wheel_delta

    def press_key(self, key: Key) -> None:
        """Mark a key as held down."""
        self._pressed.add(_key_code(key))

    def release_key(self, key: Key) -> None:
        """Mark a key as released."""
        self._pressed.discard(_key_code(key))

    # --- queries --------------------------------------------------------

    def get_key(self, key: Key) -> bool:
        """Whether the key is held down."""
        if self._blocked():
            return False
        return _key_code(key) in self._pressed

    def get_mouse_button(self, button: MouseButton) -> bool:
        """Whether the button is held, having been down last frame too."""
        if self._blocked():
            return False
        return self._down[button] and self._prev_down[button]

    def get_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the button went down this frame."""
        if self._blocked():
            return False
        return self._down[button] and not self._prev_down[button]

    def get_mouse_button_up(self, button: MouseButton) -> bool:
        """Whether the button is up now and was up last frame."""
        if self._blocked():
            return False
        return not self._down[button] and not self._prev_down[button]

    # --- window geometry ------------------------------------------------

    def set_window_rect(self, left: int, top: int, right: int, bottom: int) -> None:
        """Record the window's rectangle on screen."""
        self._rect = (left, top, right, bottom)

    @property
    def window_x(self) -> int:
        return self._rect[0]

    @property
    def window_y(self) -> int:
        return self._rect[1]

    def window_center_x(self) -> int:
        """Horizontal centre of the window."""
        left, _, right, _ = self._rect
        return left + _half(right - left)

    def window_center_y(self) -> int:
        """Vertical centre of the window."""
        _, top, _, bottom = self._rect
        return top + _half(bottom - top)

    def window_width(self) -> int:
        """Half the window's horizontal extent."""
        left, _, right, _ = self._rect
        return _half(right - left)

    def window_height(self) -> int:
        """Half the window's horizontal extent, as the width reports."""
        left, _, right, _ = self._rect
        return _half(right - left)