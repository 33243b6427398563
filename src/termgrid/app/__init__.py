"""Application loop, focus tracking and reserved key bindings."""

from termgrid.app.application import Application, AppState
from termgrid.app.bindings import Binding, KeyBindings
from termgrid.app.focus import FocusController, compute_focusable
from termgrid.app.loop import FrameClock, LoopState, check_resize, dispatch_key, render_frame, step

__all__ = [
    "Application",
    "AppState",
    "Binding",
    "KeyBindings",
    "FocusController",
    "compute_focusable",
    "FrameClock",
    "LoopState",
    "check_resize",
    "dispatch_key",
    "render_frame",
    "step",
]
