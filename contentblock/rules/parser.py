"""Parser for JSON content blocker rule lists."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from ..models.request import LoadType, ResourceType
from .domains import DomainSet
from .models import (
    Action,
    AllResourceTypes,
    Block,
    BlockCookies,
    CssDisplayNone,
    DomainConstraint,
    IfDomain,
    IgnorePreviousRules,
    ResourceTypeList,
    ResourceTypeSet,
    Rule,
    RuleSet,
    Trigger,
    UnlessDomain,
)

logger = logging.getLogger(__name__)


class RuleListError(Exception):
    """Raised when a rule list cannot be loaded at all."""

    pass


class MalformedRuleList(RuleListError):
    """Raised when the rule list is not valid JSON."""

    pass


class NotAList(RuleListError):
    """Raised when the rule list is valid JSON but its root is not an array."""

    pass


_SIMPLE_ACTIONS: dict[str, Action] = {
    Block.kind: Block(),
    BlockCookies.kind: BlockCookies(),
    IgnorePreviousRules.kind: IgnorePreviousRules(),
}


def _parse_resource_type(tag: Any) -> Optional[ResourceType]:
    """Parse a resource type tag, ignoring unknown values."""
    if not isinstance(tag, str):
        return None
    try:
        return ResourceType(tag)
    except ValueError:
        return None


def _parse_load_type(tag: Any) -> Optional[LoadType]:
    """Parse a load type tag, ignoring unknown values."""
    if not isinstance(tag, str):
        return None
    try:
        return LoadType(tag)
    except ValueError:
        return None


def _compile_url_filter(trigger: dict[str, Any]) -> Optional[re.Pattern[str]]:
    """Compile the trigger's url filter, or None if it is missing or invalid."""
    url_filter = trigger.get("url-filter")
    if not isinstance(url_filter, str):
        return None

    case_sensitive = trigger.get("url-filter-is-case-sensitive") is True
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(url_filter, flags)
    except re.error as e:
        logger.debug("Invalid url-filter %r: %s", url_filter, e)
        return None


def _parse_resource_types(trigger: dict[str, Any]) -> ResourceTypeSet:
    """Parse resource-type; absent or only unknown tags means all types."""
    tags = trigger.get("resource-type")
    if not isinstance(tags, list):
        return AllResourceTypes()

    types = frozenset(t for t in map(_parse_resource_type, tags) if t is not None)
    if not types:
        return AllResourceTypes()
    return ResourceTypeList(types)


def _parse_load_type_filter(trigger: dict[str, Any]) -> Optional[LoadType]:
    """Parse load-type; only the first recognized entry is used."""
    tags = trigger.get("load-type")
    if not isinstance(tags, list):
        return None
    return next((t for t in map(_parse_load_type, tags) if t is not None), None)


def _parse_domain_set(domains: list[Any]) -> DomainSet:
    """Build a domain set from a JSON array, skipping non-string entries."""
    return DomainSet.from_domains(d for d in domains if isinstance(d, str))


def _parse_domain_constraint(trigger: dict[str, Any]) -> Optional[DomainConstraint]:
    """Parse if-domain or unless-domain. Callers reject triggers with both.

    A value that is not an array counts as absent.
    """
    if_domain = trigger.get("if-domain")
    if isinstance(if_domain, list):
        return IfDomain(_parse_domain_set(if_domain))
    unless_domain = trigger.get("unless-domain")
    if isinstance(unless_domain, list):
        return UnlessDomain(_parse_domain_set(unless_domain))
    return None


def _parse_action(action: dict[str, Any]) -> Optional[Action]:
    """Parse an action object, or None if its type or selector is unusable."""
    action_type = action.get("type")
    if not isinstance(action_type, str):
        return None

    if action_type == CssDisplayNone.kind:
        selector = action.get("selector")
        if not isinstance(selector, str):
            return None
        return CssDisplayNone(selector)

    return _SIMPLE_ACTIONS.get(action_type)


def _skip(index: int, reason: str) -> None:
    """Log a dropped rule."""
    logger.debug("Skipping rule %d: %s", index, reason)
    return None


def _build_rule(index: int, element: Any) -> Optional[Rule]:
    """Build a rule from one list element, or None if it must be dropped."""
    if not isinstance(element, dict):
        return _skip(index, "not an object")

    trigger = element.get("trigger")
    if not isinstance(trigger, dict):
        return _skip(index, "missing 'trigger' object")

    action_source = element.get("action")
    if not isinstance(action_source, dict):
        return _skip(index, "missing 'action' object")

    url_filter = _compile_url_filter(trigger)
    if url_filter is None:
        return _skip(index, "missing or invalid 'url-filter'")

    if "if-domain" in trigger and "unless-domain" in trigger:
        return _skip(index, "both 'if-domain' and 'unless-domain' configured")

    action = _parse_action(action_source)
    if action is None:
        return _skip(index, f"unusable action {action_source!r}")

    return Rule(
        trigger=Trigger(
            url_filter=url_filter,
            resource_types=_parse_resource_types(trigger),
            load_type=_parse_load_type_filter(trigger),
            domain_constraint=_parse_domain_constraint(trigger),
        ),
        action=action,
    )


def parse_rule_list(text: str) -> RuleSet:
    """
    Parse a JSON content blocker list into a rule set.

    Individual rules that are malformed are dropped; the rest of the
    list is still loaded.

    Args:
        text: JSON text holding an array of rule objects

    Returns:
        The rules that could be built, in list order

    Raises:
        MalformedRuleList: If the text is not valid JSON
        NotAList: If the JSON root is not an array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRuleList(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise NotAList(f"Rule list must be a JSON array, got {type(data).__name__}")

    rules = []
    for index, element in enumerate(data):
        rule = _build_rule(index, element)
        if rule is not None:
            rules.append(rule)

    logger.debug("Built %d of %d rule(s)", len(rules), len(data))
    return RuleSet(tuple(rules))


def parse_rule_list_file(file_path: str) -> RuleSet:
    """
    Parse a content blocker list from a UTF-8 JSON file.

    Args:
        file_path: Path to the rule list

    Returns:
        The parsed rule set

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedRuleList: If the file is not UTF-8 encoded JSON
        NotAList: If the JSON root is not an array
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Rule list not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRuleList(f"Rule list is not valid UTF-8: {e}") from e
    return parse_rule_list(text)
