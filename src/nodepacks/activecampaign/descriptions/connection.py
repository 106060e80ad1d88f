"""Connection resource parameters."""

from .common import get_all_fields, operation_selector, show_for


CONNECTION_ATTRIBUTES = [
    ("Service", "service", "The name of the service"),
    ("External accound ID", "externalid", "The id of the account in the external service"),
    ("Account Name", "name", "The name associated with the account in the external service. Often this will be a company name (e.g., \"My Toystore, Inc.\")."),
    ("Logo URL", "logoUrl", "The URL to a logo image for the external service"),
    ("Link URL", "linkUrl", "The URL to a page where the integration with the external service can be managed in the third-party's website"),
]


CONNECTION_OPERATIONS = [
    operation_selector(
        "connection",
        [
            {"name": "Create", "value": "create", "description": "Create a connection"},
            {"name": "Delete", "value": "delete", "description": "Delete a connection"},
            {"name": "Get", "value": "get", "description": "Get data of a connection"},
            {"name": "Get All", "value": "getAll", "description": "Get data of all connections"},
            {"name": "Update", "value": "update", "description": "Update a connection"},
        ],
        "create",
    ),
]


CONNECTION_FIELDS = [
    # connection:create
    *[
        {
            "displayName": display_name,
            "name": name,
            "type": "string",
            "default": "",
            "required": True,
            "displayOptions": show_for("connection", "create"),
            "description": description,
        }
        for display_name, name, description in CONNECTION_ATTRIBUTES
    ],
    # connection:delete, connection:get, connection:update
    {
        "displayName": "Connection ID",
        "name": "connectionId",
        "type": "number",
        "default": 0,
        "required": True,
        "displayOptions": show_for("connection", "delete", "get", "update"),
        "description": "ID of the connection",
    },
    # connection:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "default": {},
        "displayOptions": show_for("connection", "update"),
        "options": [
            *[
                {
                    "displayName": display_name,
                    "name": name,
                    "type": "string",
                    "default": "",
                    "description": description,
                }
                for display_name, name, description in CONNECTION_ATTRIBUTES
            ],
            {
                "displayName": "Status",
                "name": "status",
                "type": "number",
                "default": 1,
                "description": "The status of the connection (0 = error; 1 = connected)",
            },
            {
                "displayName": "Syncronisation Status",
                "name": "syncStatus",
                "type": "number",
                "default": 1,
                "description": "The status of a sync triggered on the connection (0 = sync stopped; 1 = sync running)",
            },
        ],
    },
    # connection:getAll
    *get_all_fields("connection"),
]
