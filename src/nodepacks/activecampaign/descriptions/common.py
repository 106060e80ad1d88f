"""
Parameter definitions shared by several ActiveCampaign resources.
"""

from typing import Any, Dict, List


CURRENCIES: List[Dict[str, str]] = [
    {"name": "Australian Dollar (AUD)", "value": "aud"},
    {"name": "Brazilian Real (BRL)", "value": "brl"},
    {"name": "British Pound (GBP)", "value": "gbp"},
    {"name": "Canadian Dollar (CAD)", "value": "cad"},
    {"name": "Chinese Yuan (CNY)", "value": "cny"},
    {"name": "Danish Krone (DKK)", "value": "dkk"},
    {"name": "Euro (EUR)", "value": "eur"},
    {"name": "Hong Kong Dollar (HKD)", "value": "hkd"},
    {"name": "Indian Rupee (INR)", "value": "inr"},
    {"name": "Japanese Yen (JPY)", "value": "jpy"},
    {"name": "Mexican Peso (MXN)", "value": "mxn"},
    {"name": "New Zealand Dollar (NZD)", "value": "nzd"},
    {"name": "Norwegian Krone (NOK)", "value": "nok"},
    {"name": "Polish Zloty (PLN)", "value": "pln"},
    {"name": "Singapore Dollar (SGD)", "value": "sgd"},
    {"name": "South African Rand (ZAR)", "value": "zar"},
    {"name": "Swedish Krona (SEK)", "value": "sek"},
    {"name": "Swiss Franc (CHF)", "value": "chf"},
    {"name": "US Dollar (USD)", "value": "usd"},
]


def show_for(resource: str, *operations: str) -> Dict[str, Any]:
    """displayOptions showing a parameter for the given resource/operations."""
    return {"show": {"resource": [resource], "operation": list(operations)}}


def get_all_fields(resource: str) -> List[Dict[str, Any]]:
    """The returnAll / limit pair used by every getAll operation."""
    return [
        {
            "displayName": "Return All",
            "name": "returnAll",
            "type": "boolean",
            "default": False,
            "displayOptions": show_for(resource, "getAll"),
            "description": "Whether to return all results or only up to a given limit",
        },
        {
            "displayName": "Limit",
            "name": "limit",
            "type": "number",
            "default": 100,
            "typeOptions": {"minValue": 1, "maxValue": 500},
            "displayOptions": {
                "show": {
                    "resource": [resource],
                    "operation": ["getAll"],
                    "returnAll": [False],
                },
            },
            "description": "Max number of results to return",
        },
    ]


def operation_selector(resource: str, options: List[Dict[str, str]], default: str) -> Dict[str, Any]:
    """The operation dropdown shown once a resource is picked."""
    return {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "displayOptions": {"show": {"resource": [resource]}},
        "options": options,
        "default": default,
        "description": "The operation to perform",
    }
