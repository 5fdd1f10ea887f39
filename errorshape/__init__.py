from errorshape.client import Client
from errorshape.core.config import Settings, settings
from errorshape.models.captured import DOMError, DOMException, ErrorEvent, JSError, PlatformEvent, PromiseRejectionEvent
from errorshape.models.event import Event, EventFrame, EventHint, ExceptionValue, Mechanism, Severity
from errorshape.models.frame import StackFrame, StackTrace
from errorshape.services.event_builder import event_from_exception, event_from_message, event_from_unknown_input
from errorshape.services.frames import prepare_frames_for_event
from errorshape.services.linked_errors import LinkedErrors, walk_error_tree
from errorshape.services.tracekit import compute_stack_trace

__all__ = [
    "Client",
    "DOMError",
    "DOMException",
    "ErrorEvent",
    "Event",
    "EventFrame",
    "EventHint",
    "ExceptionValue",
    "JSError",
    "LinkedErrors",
    "Mechanism",
    "PlatformEvent",
    "PromiseRejectionEvent",
    "Settings",
    "Severity",
    "StackFrame",
    "StackTrace",
    "compute_stack_trace",
    "event_from_exception",
    "event_from_message",
    "event_from_unknown_input",
    "prepare_frames_for_event",
    "settings",
    "walk_error_tree",
]
