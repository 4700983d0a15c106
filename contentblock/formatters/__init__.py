"""Output formatters for content blocker results."""

from contentblock.formatters.json import format_as_json, format_rule_set_as_json

__all__ = ["format_as_json", "format_rule_set_as_json"]
