"""Frame composition from editor state."""

from .frame import FILLER, Frame, StatusBar, compose_status_bar, render_frame

__all__ = ["FILLER", "Frame", "StatusBar", "compose_status_bar", "render_frame"]
