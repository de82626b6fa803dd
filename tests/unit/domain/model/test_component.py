"""Tests for domain/model/component.py."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from decochain.domain.model.component import BaseComponent, ValueComponent, is_number
from tests.factories import FixedComponent, make_base


class TestBaseComponentCreation:
    """Tests for valid BaseComponent creation."""

    def test_minimal_valid(self) -> None:
        orc = BaseComponent(name="Orc", value=10)
        assert orc.name == "Orc"
        assert orc.value == 10
        assert orc.text is None

    def test_description_defaults_to_name(self) -> None:
        assert make_base("Elf", 5).description() == "Elf"

    def test_description_uses_text(self) -> None:
        coffee = BaseComponent(name="SimpleCoffee", value=Decimal("1.0"), text="Coffee")
        assert coffee.description() == "Coffee"

    def test_empty_text_allowed(self) -> None:
        assert make_base(text="").description() == ""

    @pytest.mark.parametrize("value", [0, -3, 2.5, Decimal("1.25")])
    def test_numeric_value_returns_literal(self, value: object) -> None:
        assert make_base(value=value).numeric_value() == value  # type: ignore[arg-type]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(make_base(), ValueComponent)


class TestBaseComponentValidation:
    """Tests for FAIL-FIRST validation."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            BaseComponent(name="", value=1)

    @pytest.mark.parametrize("value", ["10", None, True, [1]])
    def test_non_number_value_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="value must be int, float or Decimal"):
            BaseComponent(name="Orc", value=value)  # type: ignore[arg-type]

    def test_non_str_text_raises(self) -> None:
        with pytest.raises(TypeError, match="text must be str"):
            BaseComponent(name="Orc", value=1, text=42)  # type: ignore[arg-type]


class TestBaseComponentImmutability:
    """Tests for immutability."""

    def test_frozen(self) -> None:
        orc = make_base("Orc", 10)
        with pytest.raises(FrozenInstanceError):
            orc.value = 20  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert make_base("Orc", 10) == make_base("Orc", 10)
        assert hash(make_base("Orc", 10)) == hash(make_base("Orc", 10))


class TestValueComponentProtocol:
    """Tests for structural conformance."""

    def test_foreign_class_conforms(self) -> None:
        assert isinstance(FixedComponent(1, "x"), ValueComponent)

    def test_object_without_methods_does_not_conform(self) -> None:
        assert not isinstance(object(), ValueComponent)


class TestIsNumber:
    """Tests for is_number()."""

    @pytest.mark.parametrize("value", [0, 1, -1.5, Decimal("0.7")])
    def test_numbers(self, value: object) -> None:
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, False, "1", None, 1j])
    def test_non_numbers(self, value: object) -> None:
        assert not is_number(value)
