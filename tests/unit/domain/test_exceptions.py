"""Tests for domain/exceptions.py."""

import pytest

from decochain.domain.exceptions import (
    ChainDepthError,
    DecoChainError,
    DuplicateEntryError,
    MissingComponentError,
    MixedNumericError,
    NoActionError,
    UnknownEntryError,
)


class TestHierarchy:
    """Every library error derives from DecoChainError and a builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (MissingComponentError, TypeError),
            (MixedNumericError, TypeError),
            (ChainDepthError, ValueError),
            (NoActionError, RuntimeError),
            (UnknownEntryError, KeyError),
            (DuplicateEntryError, ValueError),
        ],
    )
    def test_inherits(self, error: type[Exception], builtin: type[Exception]) -> None:
        assert issubclass(error, DecoChainError)
        assert issubclass(error, builtin)

    def test_base_can_raise_and_catch(self) -> None:
        with pytest.raises(DecoChainError, match="test message"):
            raise DecoChainError("test message")


class TestMessages:
    """Attributes and messages."""

    def test_missing_component(self) -> None:
        err = MissingComponentError(decoration="Milk", got=type(None))
        assert err.decoration == "Milk"
        assert err.got is type(None)
        assert "got NoneType" in str(err)

    def test_chain_depth(self) -> None:
        err = ChainDepthError(depth=4, max_depth=3)
        assert (err.depth, err.max_depth) == (4, 3)
        assert str(err) == "chain depth 4 exceeds max_depth=3"

    def test_no_action(self) -> None:
        assert str(NoActionError("Epic")) == "'Epic' has no action to perform"

    def test_unknown_entry_lists_available(self) -> None:
        err = UnknownEntryError(kind="base", name="Troll", available=("Orc", "Elf"))
        assert str(err) == "unknown base 'Troll' (available: Orc, Elf)"
        assert err.name == "Troll"

    def test_unknown_entry_empty_catalog(self) -> None:
        err = UnknownEntryError(kind="decoration", name="Milk", available=())
        assert str(err) == "unknown decoration 'Milk' (available: none)"

    def test_duplicate_entry(self) -> None:
        assert str(DuplicateEntryError(kind="base", name="Orc")) == "base 'Orc' already registered"

    def test_mixed_numeric(self) -> None:
        assert "'Whip' mixes float and Decimal" in str(MixedNumericError("Whip"))
