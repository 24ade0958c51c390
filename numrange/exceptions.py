class NumrangeError(Exception):
    """Base exception for all numrange errors."""


class ConfigError(NumrangeError):
    """Error loading or validating range options."""


class RangeError(NumrangeError):
    """Error parsing a range expression. Parsing stops at the first one."""


class PartError(RangeError):
    """A range error tied to one piece of the input text."""

    def __init__(self, text: str, message: str):
        self.text = text
        super().__init__(f"{message}: {text}")


class InvalidRangeSyntax(PartError):
    """A part whose separator layout matches no known range shape."""

    def __init__(self, part: str):
        self.part = part
        super().__init__(part, "Invalid range syntax")


class StartBiggerThanEnd(PartError):
    """Resolved start of a range is greater than its end."""

    def __init__(self, part: str):
        self.part = part
        super().__init__(part, "Start of the range cannot be bigger than the end")


class AmbiguousRange(InvalidRangeSyntax, StartBiggerThanEnd):
    """`A-B-C`: three separators and no leading sign to attribute one to.

    Older callers matched this case as StartBiggerThanEnd, so it is both.
    """

    def __init__(self, part: str):
        self.part = part
        # Both parents take one argument and would each format a message;
        # set the syntax message once on the shared base.
        PartError.__init__(self, part, "Invalid range syntax")


class NotANumber(PartError):
    """A fragment could not be parsed as the requested numeric kind."""

    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(fragment, "Not a number")


class SeparatorsMustBeDifferent(RangeError):
    def __init__(self):
        super().__init__("Value and range separators cannot be the same")


class InvalidSeparator(RangeError):
    def __init__(self, separator: str):
        self.separator = separator
        super().__init__(f"Separator cannot be empty: {separator!r}")
