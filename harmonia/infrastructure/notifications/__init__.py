"""Realtime notification bridge for the infrastructure layer."""

from .bridge import NotificationBridge
from .connection import Connection, Transport
from .frames import (
    AuthFrame,
    NewMessageFrame,
    build_new_message_frame,
    parse_control_frame,
    serialize_message,
)
from .registry import ConnectionRegistry
from .websocket import WebSocketTransport

__all__ = [
    "AuthFrame",
    "Connection",
    "ConnectionRegistry",
    "NewMessageFrame",
    "NotificationBridge",
    "Transport",
    "WebSocketTransport",
    "build_new_message_frame",
    "parse_control_frame",
    "serialize_message",
]
