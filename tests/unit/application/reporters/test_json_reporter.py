"""Tests for application/reporters/json_reporter.py."""

import json
from io import StringIO

from decochain.application.catalog.coffee import MILK, SIMPLE_COFFEE, WHIP
from decochain.application.chain import decorate
from decochain.application.evaluator import evaluate
from decochain.application.reporters.json_reporter import JSONReporter
from tests.factories import make_base, make_decoration


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_report_is_valid_json(self) -> None:
        output = StringIO()
        JSONReporter(output).report(evaluate(decorate(make_base("Orc", 10), make_decoration("Epic", 30))))
        data = json.loads(output.getvalue())
        assert data["value"] == 40
        assert data["depth"] == 1
        assert data["base"] == {"name": "Orc", "value": 10, "description": "Orc"}

    def test_decimal_as_string(self) -> None:
        data = JSONReporter().to_dict(evaluate(decorate(SIMPLE_COFFEE, MILK, WHIP)))
        assert data["value"] == "2.2"
        assert data["total_delta"] == "1.2"
        assert data["description"] == "Coffee, Milk, Whip"

    def test_steps(self) -> None:
        data = JSONReporter().to_dict(evaluate(decorate(SIMPLE_COFFEE, MILK)))
        assert data["steps"] == [
            {
                "name": "Milk",
                "delta": "0.5",
                "suffix": "Milk",
                "value": "1.5",
                "description": "Coffee, Milk",
                "has_action": False,
            }
        ]

    def test_compact(self) -> None:
        output = StringIO()
        JSONReporter(output, indent=None).report(evaluate(make_base("Elf", 5)))
        assert output.getvalue().count("\n") == 1

    def test_float_unchanged(self) -> None:
        data = JSONReporter().to_dict(evaluate(make_base(value=1.5)))
        assert data["value"] == 1.5
