"""Content blocker rule lists: loading and per-request evaluation."""

from contentblock.models import (
    BlockCookiesReaction,
    BlockReaction,
    HideMatchingElements,
    LoadType,
    Reaction,
    Request,
    ResourceType,
)
from contentblock.rules import (
    MalformedRuleList,
    NotAList,
    Rule,
    RuleEngine,
    RuleListError,
    RuleSet,
    parse_rule_list,
    parse_rule_list_file,
    process_rules_for_request,
)
from contentblock.rules_factory import build_rule_engine

load = parse_rule_list
load_file = parse_rule_list_file
evaluate = process_rules_for_request

__all__ = [
    "BlockCookiesReaction",
    "BlockReaction",
    "HideMatchingElements",
    "LoadType",
    "MalformedRuleList",
    "NotAList",
    "Reaction",
    "Request",
    "ResourceType",
    "Rule",
    "RuleEngine",
    "RuleListError",
    "RuleSet",
    "build_rule_engine",
    "evaluate",
    "load",
    "load_file",
]
