"""Tests for the top-level load/evaluate surface."""

import pytest

import contentblock
from contentblock import BlockCookiesReaction, BlockReaction, Request


def test_load_and_evaluate():
    """Test loading a list and evaluating a request through the package API."""
    rules = contentblock.load(
        '[{"trigger": {"url-filter": "ad.html", "if-domain": ["bad.org", "*verybad.org"]},'
        ' "action": {"type": "block"}}]'
    )

    assert contentblock.evaluate(rules, Request(url="http://bad.org/ad.html")) == [BlockReaction()]
    assert contentblock.evaluate(rules, Request(url="http://ok.bad.org/ad.html")) == []
    assert contentblock.evaluate(rules, Request(url="http://notok.verybad.org/ad.html")) == [
        BlockReaction()
    ]


def test_override_order():
    """Test that ignore-previous-rules voids only what came before it."""
    rules = contentblock.load(
        '[{"trigger": {"url-filter": "/x"}, "action": {"type": "block"}},'
        ' {"trigger": {"url-filter": "/x/sub"}, "action": {"type": "ignore-previous-rules"}},'
        ' {"trigger": {"url-filter": "/x/sub"}, "action": {"type": "block-cookies"}}]'
    )
    assert contentblock.evaluate(rules, Request(url="/x/sub")) == [BlockCookiesReaction()]


@pytest.mark.parametrize(
    "text,error",
    [("not json", contentblock.MalformedRuleList), ('{"a": 1}', contentblock.NotAList)],
)
def test_fatal_errors(text, error):
    """Test that whole-list failures raise."""
    with pytest.raises(error):
        contentblock.load(text)


def test_load_file(tmp_path):
    """Test the file loading alias."""
    path = tmp_path / "rules.json"
    path.write_text('[{"trigger": {"url-filter": "ad"}, "action": {"type": "block"}}]')
    assert len(contentblock.load_file(str(path))) == 1
