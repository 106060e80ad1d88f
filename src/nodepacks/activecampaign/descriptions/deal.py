"""Deal resource parameters."""

from .common import CURRENCIES, get_all_fields, operation_selector, show_for


DEAL_STATUSES = [
    {"name": "Open", "value": 0},
    {"name": "Won", "value": 1},
    {"name": "Lost", "value": 2},
]


def _optional_deal_fields():
    return [
        {
            "displayName": "Description",
            "name": "description",
            "type": "string",
            "default": "",
            "description": "The description of the deal",
        },
        {
            "displayName": "Deal Percentage",
            "name": "percentage",
            "type": "number",
            "default": 0,
            "typeOptions": {"minValue": 0, "maxValue": 100},
            "description": "The percentage of the deal",
        },
        {
            "displayName": "Deal Status",
            "name": "status",
            "type": "options",
            "options": DEAL_STATUSES,
            "default": 0,
            "description": "The status of the deal",
        },
    ]


DEAL_OPERATIONS = [
    operation_selector(
        "deal",
        [
            {"name": "Create", "value": "create", "description": "Create a deal"},
            {"name": "Create Note", "value": "createNote", "description": "Create a deal note"},
            {"name": "Delete", "value": "delete", "description": "Delete a deal"},
            {"name": "Get", "value": "get", "description": "Get data of a deal"},
            {"name": "Get All", "value": "getAll", "description": "Get data of all deals"},
            {"name": "Update", "value": "update", "description": "Update a deal"},
            {"name": "Update Note", "value": "updateNote", "description": "Update a deal note"},
        ],
        "create",
    ),
]


DEAL_FIELDS = [
    # deal:create
    {
        "displayName": "Title",
        "name": "title",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("deal", "create"),
        "description": "The title of the deal",
    },
    {
        "displayName": "Deal's contact ID",
        "name": "contact",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("deal", "create"),
        "description": "The ID of the deal's contact",
    },
    {
        "displayName": "Deal value",
        "name": "value",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("deal", "create"),
        "description": "The value of the deal in cents",
    },
    {
        "displayName": "Currency",
        "name": "currency",
        "type": "options",
        "options": CURRENCIES,
        "default": "eur",
        "required": True,
        "displayOptions": show_for("deal", "create"),
        "description": "The currency of the deal in 3-character ISO format",
    },
    {
        "displayName": "Deal pipeline ID",
        "name": "group",
        "type": "string",
        "default": "",
        "displayOptions": show_for("deal", "create"),
        "description": "The pipeline ID of the deal",
    },
    {
        "displayName": "Deal stage ID",
        "name": "stage",
        "type": "string",
        "default": "",
        "displayOptions": show_for("deal", "create"),
        "description": "The stage ID of the deal",
    },
    {
        "displayName": "Deal owner ID",
        "name": "owner",
        "type": "string",
        "default": "",
        "displayOptions": show_for("deal", "create"),
        "description": "The owner ID of the deal",
    },
    {
        "displayName": "Additional Fields",
        "name": "additionalFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("deal", "create"),
        "options": _optional_deal_fields(),
    },
    # deal:delete, deal:get, deal:update, deal:createNote, deal:updateNote
    {
        "displayName": "Deal ID",
        "name": "dealId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("deal", "delete", "get", "update", "createNote", "updateNote"),
        "description": "ID of the deal",
    },
    # deal:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("deal", "update"),
        "options": [
            {
                "displayName": "Title",
                "name": "title",
                "type": "string",
                "default": "",
                "description": "The title of the deal",
            },
            {
                "displayName": "Deal's contact ID",
                "name": "contact",
                "type": "number",
                "default": 0,
                "description": "The ID of the deal's contact",
            },
            {
                "displayName": "Deal value",
                "name": "value",
                "type": "number",
                "default": 0,
                "description": "The value of the deal in cents",
            },
            {
                "displayName": "Currency",
                "name": "currency",
                "type": "options",
                "options": CURRENCIES,
                "default": "eur",
                "description": "The currency of the deal in 3-character ISO format",
            },
            {
                "displayName": "Deal pipeline ID",
                "name": "group",
                "type": "string",
                "default": "",
                "description": "The pipeline ID of the deal",
            },
            {
                "displayName": "Deal stage ID",
                "name": "stage",
                "type": "string",
                "default": "",
                "description": "The stage ID of the deal",
            },
            {
                "displayName": "Deal owner ID",
                "name": "owner",
                "type": "string",
                "default": "",
                "description": "The owner ID of the deal",
            },
            *_optional_deal_fields(),
        ],
    },
    # deal:createNote, deal:updateNote
    {
        "displayName": "Deal Note",
        "name": "dealNote",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("deal", "createNote", "updateNote"),
        "description": "The content of the deal note",
    },
    {
        "displayName": "Deal Note ID",
        "name": "dealNoteId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("deal", "updateNote"),
        "description": "The ID of the deal note",
    },
    # deal:getAll
    *get_all_fields("deal"),
]
