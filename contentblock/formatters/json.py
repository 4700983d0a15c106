"""JSON formatter for content blocker results."""

import json
from typing import Any

from contentblock.models.request import HideMatchingElements, Reaction, Request
from contentblock.rules import CssDisplayNone, ResourceTypeList, Rule, RuleSet


def _reaction_to_dict(reaction: Reaction) -> dict[str, Any]:
    """Convert a Reaction to a dictionary."""
    data: dict[str, Any] = {"type": reaction.kind}
    if isinstance(reaction, HideMatchingElements):
        data["selector"] = reaction.selector
    return data


def _rule_to_dict(rule: Rule) -> dict[str, Any]:
    """Convert a Rule to a dictionary in the rule list format."""
    trigger_data: dict[str, Any] = {"url-filter": rule.trigger.url_filter.pattern}
    if rule.trigger.is_case_sensitive:
        trigger_data["url-filter-is-case-sensitive"] = True
    if isinstance(rule.trigger.resource_types, ResourceTypeList):
        trigger_data["resource-type"] = sorted(t.value for t in rule.trigger.resource_types.types)
    if rule.trigger.load_type is not None:
        trigger_data["load-type"] = [rule.trigger.load_type.value]

    constraint = rule.trigger.domain_constraint
    if constraint is not None:
        trigger_data[constraint.kind] = constraint.domains.to_domains()

    action_data: dict[str, Any] = {"type": rule.action.kind}
    if isinstance(rule.action, CssDisplayNone):
        action_data["selector"] = rule.action.selector

    return {"trigger": trigger_data, "action": action_data}


def _dumps(data: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2)
    return json.dumps(data)


def format_as_json(request: Request, reactions: list[Reaction], *, pretty: bool = True) -> str:
    """Format the reactions decided for a request as JSON.

    Args:
        request: The evaluated request
        reactions: Reactions returned by the rule engine
        pretty: If True, format with indentation for readability

    Returns:
        JSON-formatted string
    """
    data = {
        "request": {
            "url": request.url,
            "resource-type": request.resource_type.value,
            "load-type": request.load_type.value,
        },
        "reactions": [_reaction_to_dict(reaction) for reaction in reactions],
    }
    return _dumps(data, pretty)


def format_rule_set_as_json(rules: RuleSet, *, pretty: bool = True) -> str:
    """Format a loaded rule set back into the rule list format.

    Only rules that survived loading are included, with defaults left out.
    """
    return _dumps([_rule_to_dict(rule) for rule in rules], pretty)
