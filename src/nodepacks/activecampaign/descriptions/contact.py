"""Contact resource parameters."""

from .common import get_all_fields, operation_selector, show_for


def _contact_fields():
    return [
        {
            "displayName": "First Name",
            "name": "firstName",
            "type": "string",
            "default": "",
            "description": "The first name of the contact",
        },
        {
            "displayName": "Last Name",
            "name": "lastName",
            "type": "string",
            "default": "",
            "description": "The last name of the contact",
        },
        {
            "displayName": "Phone",
            "name": "phone",
            "type": "string",
            "default": "",
            "description": "Phone number of the contact",
        },
        {
            "displayName": "Custom Properties",
            "name": "customProperties",
            "type": "fixedCollection",
            "placeholder": "Add Custom Property",
            "default": {},
            "typeOptions": {"multipleValues": True},
            "description": "Adds a custom property to set also values which have not been predefined",
            "options": [
                {
                    "name": "property",
                    "displayName": "Property",
                    "values": [
                        {
                            "displayName": "Property Name",
                            "name": "name",
                            "type": "string",
                            "default": "",
                            "description": "Name of the property to set",
                        },
                        {
                            "displayName": "Property Value",
                            "name": "value",
                            "type": "string",
                            "default": "",
                            "description": "Value of the property to set",
                        },
                    ],
                },
            ],
        },
    ]


CONTACT_OPERATIONS = [
    operation_selector(
        "contact",
        [
            {"name": "Create", "value": "create", "description": "Create a contact"},
            {"name": "Delete", "value": "delete", "description": "Delete a contact"},
            {"name": "Get", "value": "get", "description": "Get data of a contact"},
            {"name": "Get All", "value": "getAll", "description": "Get data of all contacts"},
            {"name": "Update", "value": "update", "description": "Update a contact"},
        ],
        "create",
    ),
]


CONTACT_FIELDS = [
    # contact:create
    {
        "displayName": "Email",
        "name": "email",
        "type": "string",
        "default": "",
        "required": True,
        "displayOptions": show_for("contact", "create"),
        "description": "The email of the contact to create",
    },
    {
        "displayName": "Update if exists",
        "name": "updateIfExists",
        "type": "boolean",
        "default": False,
        "displayOptions": show_for("contact", "create"),
        "description": "Update user if it exists already. If not set and user exists it will error instead.",
    },
    {
        "displayName": "Additional Fields",
        "name": "additionalFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("contact", "create"),
        "options": _contact_fields(),
    },
    # contact:delete, contact:get, contact:update
    {
        "displayName": "Contact ID",
        "name": "contactId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("contact", "delete", "get", "update"),
        "description": "ID of the contact",
    },
    # contact:getAll
    *get_all_fields("contact"),
    # contact:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("contact", "update"),
        "options": [
            {
                "displayName": "Email",
                "name": "email",
                "type": "string",
                "default": "",
                "description": "Email of the contact",
            },
            *_contact_fields(),
        ],
    },
]
