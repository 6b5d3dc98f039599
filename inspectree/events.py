"""Generic event names to engine event names and handler props."""

from __future__ import annotations

# Lowercase DOM event names whose engine name is camelCased.
# Names not listed here are already engine names ("click", "change", ...).
NATIVE_TO_ENGINE_EVENT_MAP: dict[str, str] = {
    "beforeinput": "beforeInput",
    "compositionend": "compositionEnd",
    "compositionstart": "compositionStart",
    "compositionupdate": "compositionUpdate",
    "keydown": "keyDown",
    "keyup": "keyUp",
    "keypress": "keyPress",
    "contextmenu": "contextMenu",
    "dblclick": "doubleClick",
    "doubleclick": "doubleClick",
    "dragend": "dragEnd",
    "dragenter": "dragEnter",
    "dragexit": "dragExit",
    "dragleave": "dragLeave",
    "dragover": "dragOver",
    "dragstart": "dragStart",
    "mousedown": "mouseDown",
    "mouseenter": "mouseEnter",
    "mouseleave": "mouseLeave",
    "mousemove": "mouseMove",
    "mouseout": "mouseOut",
    "mouseover": "mouseOver",
    "mouseup": "mouseUp",
    "touchcancel": "touchCancel",
    "touchend": "touchEnd",
    "touchmove": "touchMove",
    "touchstart": "touchStart",
    "canplay": "canPlay",
    "canplaythrough": "canPlayThrough",
    "durationchange": "durationChange",
    "loadeddata": "loadedData",
    "loadedmetadata": "loadedMetadata",
    "loadstart": "loadStart",
    "ratechange": "rateChange",
    "timeupdate": "timeUpdate",
    "volumechange": "volumeChange",
}


def map_native_event_name(event: str) -> str:
    """Return the engine's name for a generic event name.

    Examples::

        >>> map_native_event_name("dblclick")
        'doubleClick'
        >>> map_native_event_name("click")
        'click'
    """
    return NATIVE_TO_ENGINE_EVENT_MAP.get(event, event)


def prop_from_event(event: str) -> str:
    """Return the name of the prop that holds the handler for *event*.

    Examples::

        >>> prop_from_event("click")
        'onClick'
        >>> prop_from_event("mouseenter")
        'onMouseEnter'
    """
    engine_event = map_native_event_name(event)
    return f"on{engine_event[:1].upper()}{engine_event[1:]}"
