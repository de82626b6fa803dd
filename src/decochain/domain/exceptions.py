"""Domain exceptions: all public errors of decochain.

All exceptions visible to users are defined in domain.
Application layer uses these, does not define its own public exceptions.
"""


class DecoChainError(Exception):
    """Base for all decochain errors.

    Allows: except DecoChainError to catch all library errors.
    """


class MissingComponentError(DecoChainError, TypeError):
    """Decorator constructed without a usable wrapped component.

    Inherits TypeError for semantic correctness (expected component, got X).

    Attributes:
        decoration: Name of the decoration being applied.
        got: Type of the object passed as wrapped component.
    """

    def __init__(self, *, decoration: str, got: type) -> None:
        """Initialize with decoration name and actual type."""
        self.decoration = decoration
        self.got = got
        super().__init__(
            f"'{decoration}' must wrap a component with numeric_value() and description(), "
            f"got {got.__name__}"
        )


class ChainDepthError(DecoChainError, ValueError):
    """Chain exceeds configured maximum depth.

    Attributes:
        depth: Depth the chain would reach.
        max_depth: Configured limit.
    """

    def __init__(self, *, depth: int, max_depth: int) -> None:
        """Initialize with offending depth and limit."""
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"chain depth {depth} exceeds max_depth={max_depth}")


class NoActionError(DecoChainError, RuntimeError):
    """perform() called on a decorator that has no action.

    Attributes:
        decoration: Name of the decoration without action.
    """

    def __init__(self, decoration: str) -> None:
        """Initialize with decoration name."""
        self.decoration = decoration
        super().__init__(f"'{decoration}' has no action to perform")


class UnknownEntryError(DecoChainError, KeyError):
    """Catalog has no entry with requested name.

    Inherits KeyError: lookup by missing key.

    Attributes:
        kind: "base" or "decoration".
        name: Requested name.
        available: Names registered for this kind.
    """

    def __init__(self, *, kind: str, name: str, available: tuple[str, ...]) -> None:
        """Initialize with lookup details."""
        self.kind = kind
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        """KeyError repr()s its argument, override for a readable message."""
        known = ", ".join(self.available) or "none"
        return f"unknown {self.kind} '{self.name}' (available: {known})"


class DuplicateEntryError(DecoChainError, ValueError):
    """Catalog already has an entry with this name.

    Attributes:
        kind: "base" or "decoration".
        name: Duplicated name.
    """

    def __init__(self, *, kind: str, name: str) -> None:
        """Initialize with duplicated entry."""
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' already registered")


class MixedNumericError(DecoChainError, TypeError):
    """Chain would add a float to a Decimal (or vice versa).

    Decimal + float raises in Python, detected at construction instead of evaluation.

    Attributes:
        decoration: Name of the decoration being applied.
    """

    def __init__(self, decoration: str) -> None:
        """Initialize with decoration name."""
        self.decoration = decoration
        super().__init__(f"'{decoration}' mixes float and Decimal values in one chain")
