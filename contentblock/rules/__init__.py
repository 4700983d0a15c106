"""Rules system for content blocker lists."""

from .domains import DomainSet
from .engine import RuleEngine, process_rules_for_request
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
from .parser import (
    MalformedRuleList,
    NotAList,
    RuleListError,
    parse_rule_list,
    parse_rule_list_file,
)

__all__ = [
    "Action",
    "AllResourceTypes",
    "Block",
    "BlockCookies",
    "CssDisplayNone",
    "DomainConstraint",
    "DomainSet",
    "IfDomain",
    "IgnorePreviousRules",
    "MalformedRuleList",
    "NotAList",
    "ResourceTypeList",
    "ResourceTypeSet",
    "Rule",
    "RuleEngine",
    "RuleListError",
    "RuleSet",
    "Trigger",
    "UnlessDomain",
    "parse_rule_list",
    "parse_rule_list_file",
    "process_rules_for_request",
]
