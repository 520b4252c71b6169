"""Blocking events and a type-based dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Callable, ClassVar

from .core import bit


class EventType(Enum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    WINDOW_MAXIMIZED = 6
    WINDOW_MINIMIZED = 7
    APP_TICK = 8
    APP_UPDATE = 9
    APP_RENDER = 10
    APP_ACTIVE = 11
    KEY_PRESSED = 12
    KEY_RELEASED = 13
    KEY_TYPED = 14
    MOUSE_BUTTON_PRESSED = 15
    MOUSE_BUTTON_RELEASED = 16
    MOUSE_MOVED = 17
    MOUSE_SCROLLED = 18

    @property
    def label(self) -> str:
        """The type's name in CamelCase, e.g. ``WindowResize``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = bit(0)
    INPUT = bit(1)
    KEYBOARD = bit(2)
    MOUSE = bit(3)
    MOUSE_BUTTON = bit(4)


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Event:
    """Base of all events. Concrete classes set ``event_type`` and ``category_flags``."""

    event_type: ClassVar[EventType]
    category_flags: ClassVar[EventCategory]

    handled: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        cls = type(self)
        if not hasattr(cls, "event_type") or not hasattr(cls, "category_flags"):
            raise TypeError(f"{cls.__name__} is abstract and cannot be instantiated")

    @property
    def name(self) -> str:
        return self.event_type.label

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


class EventDispatcher:
    """Routes one event to a handler when the event's type matches."""

    def __init__(self, event: Event) -> None:
        self._event = event

    @property
    def event(self) -> Event:
        return self._event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event has ``event_class``'s type; its result sets ``handled``."""
        if self._event.event_type is not event_class.event_type:
            return False
        self._event.handled = bool(func(self._event))
        return True


# Application events


@dataclass
class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION

    width: int
    height: int
    minimized: bool = False
    maximized: bool = True

    def __str__(self) -> str:
        return f"WindowResizeEvent: {int(self.width)}, {int(self.height)}"


@dataclass
class WindowStateChangeEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


@dataclass
class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category_flags = EventCategory.APPLICATION


@dataclass
class AppActiveEvent(Event):
    event_type = EventType.APP_ACTIVE
    category_flags = EventCategory.APPLICATION

    paused: bool

    @property
    def running(self) -> bool:
        return not self.paused


@dataclass
class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category_flags = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category_flags = EventCategory.APPLICATION


# Key events


@dataclass
class KeyEvent(Event):
    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({int(self.repeat_count)} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


# Mouse events


@dataclass
class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"