"""SNS message document construction.

SNS ``MessageStructure=json`` expects a JSON object whose keys name the
delivery protocol and whose values are strings; platform sections are
themselves JSON documents serialized to strings.

    {"default": "...", "APNS": "{\"aps\": ...}", "GCM": "{\"notification\": ...}"}
"""

from __future__ import annotations

import json
from typing import Any

from push_service.core.schemas.common import TopicKind

_APNS_SECTIONS = ("APNS", "APNS_SANDBOX")
_FCM_SECTION = "GCM"


def _links(deep_link: str | None, web_link: str | None) -> dict[str, str]:
    links: dict[str, str] = {}
    if deep_link:
        links["deepLink"] = deep_link
    if web_link:
        links["webLink"] = web_link
    return links


def _apns_payload(title: str, content: str, links: dict[str, str]) -> str:
    payload: dict[str, Any] = {
        "aps": {
            "alert": {"title": title, "body": content},
            "sound": "default",
        },
        **links,
    }
    return json.dumps(payload, ensure_ascii=False)


def _fcm_payload(title: str, content: str, links: dict[str, str]) -> str:
    payload: dict[str, Any] = {
        "notification": {"title": title, "body": content},
        "data": links,
    }
    return json.dumps(payload, ensure_ascii=False)


def build_message(
    topic_kind: TopicKind,
    title: str,
    content: str,
    deep_link: str | None = None,
    web_link: str | None = None,
) -> str:
    """Build an SNS JSON message document for ``topic_kind``.

    Args:
        topic_kind: Which platform sections to include.
        title: Notification title.
        content: Notification body, also used as the ``default`` section.
        deep_link: Optional in-app link.
        web_link: Optional web link.

    Returns:
        Serialized message document for ``sns.publish(MessageStructure="json")``.
    """
    links = _links(deep_link, web_link)
    document: dict[str, str] = {"default": content}

    if topic_kind in (TopicKind.APNS, TopicKind.ALL):
        apns = _apns_payload(title, content, links)
        for section in _APNS_SECTIONS:
            document[section] = apns

    if topic_kind in (TopicKind.FCM, TopicKind.ALL):
        document[_FCM_SECTION] = _fcm_payload(title, content, links)

    return json.dumps(document, ensure_ascii=False)
