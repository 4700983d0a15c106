import json
from typing import Any

from contentblock.models.request import LoadType, Request, ResourceType


def rule_json(url_filter: str = "", action: Any = "block", **trigger: Any) -> dict[str, Any]:
    """Build one rule object in the rule list format.

    Trigger keyword arguments use underscores in place of dashes
    (``if_domain`` becomes ``if-domain``).
    """
    trigger_data = {"url-filter": url_filter}
    trigger_data.update({key.replace("_", "-"): value for key, value in trigger.items()})
    action_data = action if isinstance(action, dict) else {"type": action}
    return {"trigger": trigger_data, "action": action_data}


def rule_list(*rules: dict[str, Any]) -> str:
    """Serialize rule objects to rule list JSON text."""
    return json.dumps(list(rules))


def make_request(
    url: str,
    resource_type: ResourceType = ResourceType.DOCUMENT,
    load_type: LoadType = LoadType.FIRST_PARTY,
) -> Request:
    """Create a request for tests."""
    return Request(url=url, resource_type=resource_type, load_type=load_type)
