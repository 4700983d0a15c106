"""Rule engine for deciding the reactions to a request."""

from typing import Callable, cast

from ..models.request import (
    BlockCookiesReaction,
    BlockReaction,
    HideMatchingElements,
    Reaction,
    Request,
)
from .models import Action, Block, BlockCookies, CssDisplayNone, IgnorePreviousRules, RuleSet


def _handle_block(action: Action, reactions: list[Reaction]) -> None:
    """Handle the block action."""
    reactions.append(BlockReaction())


def _handle_block_cookies(action: Action, reactions: list[Reaction]) -> None:
    """Handle the block-cookies action."""
    reactions.append(BlockCookiesReaction())


def _handle_css_display_none(action: Action, reactions: list[Reaction]) -> None:
    """Handle the css-display-none action."""
    reactions.append(HideMatchingElements(cast(CssDisplayNone, action).selector))


def _handle_ignore_previous_rules(action: Action, reactions: list[Reaction]) -> None:
    """Handle the ignore-previous-rules action."""
    reactions.clear()


_ACTION_HANDLERS: dict[type, Callable[[Action, list[Reaction]], None]] = {
    Block: _handle_block,
    BlockCookies: _handle_block_cookies,
    CssDisplayNone: _handle_css_display_none,
    IgnorePreviousRules: _handle_ignore_previous_rules,
}


def process_rules_for_request(rules: RuleSet, request: Request) -> list[Reaction]:
    """Match a request against the rules and collect the reactions to take.

    Rules are visited in order. An empty result means the request should
    continue unmodified.

    Args:
        rules: The rule set to evaluate; it is not modified
        request: The request to evaluate

    Returns:
        Reactions in the order the matching rules produced them
    """
    reactions: list[Reaction] = []
    for rule in rules:
        if rule.trigger.matches(request):
            _ACTION_HANDLERS[type(rule.action)](rule.action, reactions)
    return reactions


class RuleEngine:
    """Engine for evaluating requests against one rule set.

    The rule set is shared read-only, so one engine can serve any number
    of concurrent evaluations.
    """

    def __init__(self, rules: RuleSet):
        """Initialize the rule engine with a rule set."""
        self.rules = rules

    def evaluate(self, request: Request) -> list[Reaction]:
        """Return the reactions for a request."""
        return process_rules_for_request(self.rules, request)

    def should_block(self, request: Request) -> bool:
        """Check if the request must not be started."""
        return any(isinstance(r, BlockReaction) for r in self.evaluate(request))
