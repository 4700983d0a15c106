"""Factory for building rule engines from settings."""

import logging
from pathlib import Path

from contentblock.config import BlockerSettings
from contentblock.rules import (
    CssDisplayNone,
    MalformedRuleList,
    NotAList,
    ResourceTypeList,
    Rule,
    RuleEngine,
    RuleSet,
    parse_rule_list_file,
)

logger = logging.getLogger(__name__)


def describe_rule(rule: Rule) -> str:
    """Summarize a rule on one line."""
    trigger = rule.trigger
    parts = [f"url-filter={trigger.url_filter.pattern!r}"]
    if trigger.is_case_sensitive:
        parts.append("case-sensitive")
    if isinstance(trigger.resource_types, ResourceTypeList):
        types = sorted(t.value for t in trigger.resource_types.types)
        parts.append(f"resource-type={'|'.join(types)}")
    if trigger.load_type is not None:
        parts.append(f"load-type={trigger.load_type.value}")
    if trigger.domain_constraint is not None:
        constraint = trigger.domain_constraint
        parts.append(f"{constraint.kind}={'|'.join(constraint.domains.to_domains())}")

    action = rule.action.kind
    if isinstance(rule.action, CssDisplayNone):
        action = f"{action}({rule.action.selector})"
    return f"{action} ({', '.join(parts)})"


def _load_rules_from_file(rules_file_path: str) -> RuleSet:
    """Load rules from a file with error handling.

    Args:
        rules_file_path: Path to the JSON rule list

    Returns:
        The loaded rule set

    Raises:
        FileNotFoundError: If file doesn't exist
        RuleListError: If the list as a whole cannot be parsed
    """
    path = Path(rules_file_path)
    logger.info("Loading rules from file: %s", path)

    try:
        rules = parse_rule_list_file(str(path))
    except (FileNotFoundError, MalformedRuleList, NotAList) as e:
        logger.error("Failed to load rules file: %s", e)
        raise

    logger.info("Loaded %d rule(s) from %s", len(rules), path)
    return rules


def _log_active_rules(rules: RuleSet) -> None:
    """Log the active rules for debugging."""
    if not rules:
        logger.warning("No rules configured - requests will proceed unmodified")
        return

    logger.debug("Active rules:")
    for index, rule in enumerate(rules):
        logger.debug("  %d: %s", index, describe_rule(rule))


def build_rule_engine(settings: BlockerSettings) -> RuleEngine:
    """Build a rule engine from settings.

    Args:
        settings: Settings containing the rule list configuration

    Returns:
        Configured RuleEngine instance
    """
    if settings.rules.rules_file:
        rules = _load_rules_from_file(settings.rules.rules_file)
    else:
        rules = RuleSet()

    _log_active_rules(rules)
    return RuleEngine(rules)
