"""Seeded routing form used by routing tests.

Static fixture data: five routes evaluated top to bottom (four rules over a
text field or a multiselect field, then an unconditional fallback) and two
fields.
"""

import copy
import logging

from sqlalchemy.orm import Session

from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.models import RoutingForm, User

logger = logging.getLogger(__name__)

SEEDED_FORM_ID = "948ae412-d995-4865-875a-48302588de03"
SEEDED_FORM_NAME = "Seeded Form - Pro"

TEXT_FIELD_ID = "c4296635-9f12-47b1-8153-c3a854649182"
MULTISELECT_FIELD_ID = "d4292635-9f12-17b1-9153-c3a854649182"


def _text_equals_route(route_id: str, rule_id: str, value: str, action: dict) -> dict:
    return {
        "id": route_id,
        "action": action,
        "queryValue": {
            "id": route_id,
            "type": "group",
            "children1": {
                rule_id: {
                    "type": "rule",
                    "properties": {
                        "field": TEXT_FIELD_ID,
                        "value": [value],
                        "operator": "equal",
                        "valueSrc": ["value"],
                        "valueType": ["text"],
                    },
                },
            },
        },
    }


SEEDED_FORM_ROUTES: tuple[dict, ...] = (
    _text_equals_route(
        "8a898988-89ab-4cde-b012-31823f708642",
        "8988bbb8-0123-4456-b89a-b1823f70c5ff",
        "event-routing",
        {"type": "eventTypeRedirectUrl", "value": "pro/30min"},
    ),
    _text_equals_route(
        "aa8aaba9-cdef-4012-b456-71823f70f7ef",
        "b99b8a89-89ab-4cde-b012-31823f718ff5",
        "custom-page",
        {"type": "customPageMessage", "value": "Custom Page Result"},
    ),
    _text_equals_route(
        "a8ba9aab-4567-489a-bcde-f1823f71b4ad",
        "998b9b9a-0123-4456-b89a-b1823f7232b9",
        "external-redirect",
        {"type": "externalRedirectUrl", "value": "https://google.com"},
    ),
    {
        "id": "aa8ba8b9-0123-4456-b89a-b182623406d8",
        "action": {"type": "customPageMessage", "value": "Multiselect chosen"},
        "queryValue": {
            "id": "aa8ba8b9-0123-4456-b89a-b182623406d8",
            "type": "group",
            "children1": {
                "b98a8abb-cdef-4012-b456-718262343d27": {
                    "type": "rule",
                    "properties": {
                        "field": MULTISELECT_FIELD_ID,
                        "value": [["Option-2"]],
                        "operator": "multiselect_equals",
                        "valueSrc": ["value"],
                        "valueType": ["multiselect"],
                    },
                },
            },
        },
    },
    {
        "id": "898899aa-4567-489a-bcde-f1823f708646",
        "action": {"type": "customPageMessage", "value": "Fallback Message"},
        "isFallback": True,
        "queryValue": {"id": "898899aa-4567-489a-bcde-f1823f708646", "type": "group"},
    },
)

SEEDED_FORM_FIELDS: tuple[dict, ...] = (
    {
        "id": TEXT_FIELD_ID,
        "type": "text",
        "label": "Test field",
        "required": True,
    },
    {
        "id": MULTISELECT_FIELD_ID,
        "type": "multiselect",
        "label": "Multi Select",
        "identifier": "multi",
        "selectText": "Option-1\nOption-2",
        "required": False,
    },
)


def seed_routing_form(db: Session, user: User) -> RoutingForm:
    """Insert the seeded routing form for user."""
    form = RoutingForm(
        id=SEEDED_FORM_ID,
        name=SEEDED_FORM_NAME,
        routes=copy.deepcopy(list(SEEDED_FORM_ROUTES)),
        fields=copy.deepcopy(list(SEEDED_FORM_FIELDS)),
        user_id=user.id,
    )
    db.add(form)
    db.commit()

    logger.info(
        f"Seeded routing form {SEEDED_FORM_ID}",
        extra=build_log_context(user_id=user.id),
    )
    return form
