"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- ConsoleReporter report() output
- Reporting does not consume the selector
"""

import pytest

from selectorkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from selectorkit.domain.model.category import Category
from selectorkit.domain.model.selector_parts import SelectorParts
from selectorkit.presentation.api.builder import Selector
from tests.factories import make_selector


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width == 100
        assert config.show_empty is False
        assert config.title == "SELECTOR"

    def test_custom_values(self) -> None:
        config = ConsoleConfig(width=80, show_empty=True, title="CHECK")
        assert config.width == 80
        assert config.show_empty is True
        assert config.title == "CHECK"

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 20"):
            ConsoleConfig(width=10)

    def test_empty_title_raises(self) -> None:
        with pytest.raises(ValueError, match="title must not be empty"):
            ConsoleConfig(title="")


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        output = ConsoleReporter().report(Selector())
        assert "SELECTOR" in output

    def test_custom_title(self) -> None:
        output = ConsoleReporter(ConsoleConfig(title="MY SELECTOR")).report(Selector())
        assert "MY SELECTOR" in output

    def test_title_brackets_are_not_markup(self) -> None:
        """Title is printed literally, even when it looks like a tag."""
        output = ConsoleReporter(ConsoleConfig(title="a[/b]")).report(Selector())
        assert "a[/b]" in output

    def test_title_style_tag_is_literal(self) -> None:
        output = ConsoleReporter(ConsoleConfig(title="[red]")).report(Selector())
        assert "[red]" in output

    def test_empty_selector(self) -> None:
        output = ConsoleReporter().report(Selector())
        assert "empty selector" in output

    def test_fragment_rows(self) -> None:
        selector = make_selector(
            (Category.TYPE, "a"),
            (Category.CLASS, "big"),
            (Category.CLASS, "red"),
        )
        output = ConsoleReporter().report(selector)
        assert "Rendered:" in output
        assert "a.big.red" in output
        assert ".big.red" in output
        assert "class" in output
        assert "pseudo-element" not in output

    def test_show_empty_lists_all_categories(self) -> None:
        selector = make_selector((Category.ID, "main"))
        output = ConsoleReporter(ConsoleConfig(show_empty=True)).report(selector)
        assert "pseudo-element" in output
        assert "#main" in output

    def test_attribute_brackets_are_not_markup(self) -> None:
        selector = make_selector((Category.ATTRIBUTE, 'href$=".png"'))
        output = ConsoleReporter().report(selector)
        assert '[href$=".png"]' in output

    def test_combined_selector(self) -> None:
        selector = Selector(SelectorParts.joined("div > span"))
        output = ConsoleReporter().report(selector)
        assert "div > span" in output
        assert "combined selector" in output

    def test_does_not_consume(self) -> None:
        selector = make_selector((Category.TYPE, "div"))
        ConsoleReporter().report(selector)
        assert selector.stringify() == "div"
