"""
Error values raised by the rule engine and the resolver.

Every failure carries its kind and the structured data that caused it.
Nothing here is ever mutated after construction: text rendering happens
at the boundary through str(err) / err.message.

    MissingTargetLines    fewer target references than the rule needs
    InvalidAction         formula(s) do not fit the rule, or unknown keyword
    InvalidLineReference  a reference outside the lines solved so far
"""


class LogicError(Exception):
    """Base class for every failure the engine reports."""

    kind = "logic_error"

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""


class InvalidAction(LogicError):
    """The referenced formulas do not match the rule's structural shape."""

    kind = "invalid_action"

    def __init__(self, reason: str = ""):
        self._reason = reason
        super().__init__("invalid action")

    @property
    def reason(self) -> str:
        return self._reason


class MissingTargetLines(LogicError):
    kind = "missing_target_lines"

    def __init__(self, received: int, minimum: int):
        self._received = received
        self._minimum = minimum
        super().__init__(f"min target lines: {minimum}, received: {received}")

    @property
    def received(self) -> int:
        return self._received

    @property
    def minimum(self) -> int:
        return self._minimum


class InvalidLineReference(LogicError):
    """`line` is the 1-based reference exactly as the caller wrote it."""

    kind = "invalid_line_reference"

    def __init__(self, line: int):
        self._line = line
        super().__init__(f"line '{line}' does not exist")

    @property
    def line(self) -> int:
        return self._line
