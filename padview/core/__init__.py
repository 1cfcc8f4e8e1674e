from __future__ import annotations

from padview.core.buttons import ButtonStateMachine, apply_button
from padview.core.navigation import NavigationHost
from padview.core.publisher import RenderPublisher
from padview.core.screen import ButtonHandler, DeviceChangeAware, Renderable, Screen, ScreenContext
from padview.core.tasks import CancelToken, TaskBinding, TaskHandle

__all__ = [
    "ButtonHandler",
    "ButtonStateMachine",
    "CancelToken",
    "DeviceChangeAware",
    "NavigationHost",
    "Renderable",
    "RenderPublisher",
    "Screen",
    "ScreenContext",
    "TaskBinding",
    "TaskHandle",
    "apply_button",
]
