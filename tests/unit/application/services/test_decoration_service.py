"""Tests for application/services/decoration_service.py."""

from decimal import Decimal
from io import StringIO

import pytest

from decochain.application.catalog import EPIC, ORC, characters
from decochain.application.chain import decorate
from decochain.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from decochain.application.services import DecorationService
from decochain.domain.exceptions import ChainDepthError, UnknownEntryError
from decochain.domain.model.configuration import ChainConfig
from decochain.domain.model.evaluation import Evaluation
from tests.factories import make_base


class RecordingReporter:
    """Reporter collecting every evaluation it receives."""

    def __init__(self) -> None:
        self.reports: list[Evaluation] = []

    def report(self, evaluation: Evaluation) -> None:
        self.reports.append(evaluation)


class TestDecorationServiceCreation:
    """Tests for construction and factories."""

    def test_none_catalog_raises(self) -> None:
        with pytest.raises(TypeError, match="catalog must not be None"):
            DecorationService(None)  # type: ignore[arg-type]

    def test_for_coffee(self) -> None:
        assert DecorationService.for_coffee().catalog.name == "coffee"

    def test_for_characters(self) -> None:
        assert DecorationService.for_characters(sink=lambda _: None).catalog.name == "characters"


class TestBuildAndEvaluate:
    """Tests for build() and evaluate() by name."""

    def test_build(self, character_service: DecorationService) -> None:
        assert character_service.build("Orc", "Warlord", "Epic", "Epic").numeric_value() == 120

    def test_build_base_only(self, character_service: DecorationService) -> None:
        assert character_service.build("Elf") == make_base("Elf", 5)

    def test_evaluate(self, coffee_service: DecorationService) -> None:
        result = coffee_service.evaluate("SimpleCoffee", "Milk", "Whip")
        assert result.value == Decimal("2.2")
        assert result.description == "Coffee, Milk, Whip"

    def test_unknown_base(self, coffee_service: DecorationService) -> None:
        with pytest.raises(UnknownEntryError, match="unknown base 'Tea'"):
            coffee_service.build("Tea")

    def test_unknown_decoration(self, coffee_service: DecorationService) -> None:
        with pytest.raises(UnknownEntryError, match="available: Milk, Whip"):
            coffee_service.build("SimpleCoffee", "Sugar")

    def test_config_limits_depth(self) -> None:
        service = DecorationService.for_coffee(config=ChainConfig(max_depth=1))
        with pytest.raises(ChainDepthError):
            service.build("SimpleCoffee", "Milk", "Whip")

    def test_reporter_called_on_evaluate(self) -> None:
        reporter = RecordingReporter()
        service = DecorationService.for_coffee(reporter=reporter)
        result = service.evaluate("SimpleCoffee", "Milk")
        assert reporter.reports == [result]

    def test_console_reporter_writes_on_evaluate(self) -> None:
        output = StringIO()
        reporter = ConsoleReporter(ConsoleConfig(force_terminal=False), output=output)
        DecorationService.for_coffee(reporter=reporter).evaluate("SimpleCoffee", "Milk")
        assert "Coffee, Milk" in output.getvalue()
        assert "Result: Coffee, Milk: 1.5" in output.getvalue()

    def test_plain_text_reporter_writes_on_evaluate(self) -> None:
        output = StringIO()
        DecorationService.for_coffee(reporter=PlainTextReporter(output)).evaluate("SimpleCoffee", "Milk")
        assert "Result: Coffee, Milk: 1.5" in output.getvalue()

    def test_reporter_not_called_on_build(self) -> None:
        reporter = RecordingReporter()
        DecorationService.for_coffee(reporter=reporter).build("SimpleCoffee", "Milk")
        assert reporter.reports == []


class TestPerform:
    """Tests for perform()."""

    def test_runs_actions_outermost_first(self) -> None:
        log: list[str] = []
        inner = characters(lambda message: log.append(f"inner:{message}")).decoration("Warlord")
        outer = characters(lambda message: log.append(f"outer:{message}")).decoration("Warlord")
        head = decorate(ORC, inner, EPIC, outer)
        assert DecorationService.for_characters(sink=log.append).perform(head) == 2
        assert log == ["outer:For the Horde!", "inner:For the Horde!"]
        assert head.numeric_value() == 140

    def test_counts_and_leaves_values(
        self,
        character_service: DecorationService,
        cry_log: list[str],
    ) -> None:
        head = character_service.build("Orc", "Warlord", "Epic", "Epic")
        assert character_service.perform(head) == 1
        assert cry_log == ["For the Horde!"]
        assert head.numeric_value() == 120

    def test_no_actions(self, coffee_service: DecorationService) -> None:
        assert coffee_service.perform(coffee_service.build("SimpleCoffee", "Milk")) == 0

    def test_base_only(self, coffee_service: DecorationService) -> None:
        assert coffee_service.perform(coffee_service.build("SimpleCoffee")) == 0
