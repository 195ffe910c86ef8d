"""Common schemas shared by the push and token features."""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Device platforms a push endpoint can be registered for."""

    IOS = "iOS"
    ANDROID = "Android"


class TopicKind(str, Enum):
    """Message topic tag used to pick the wire sections of a push message.

    APNS carries the Apple sections, FCM the Firebase (GCM) section, and
    ALL every section so a single broadcast reaches both platforms.
    """

    APNS = "apns"
    FCM = "fcm"
    ALL = "all"
