"""Errors reported by the name constructors.

The constructors return these alongside a zero-valued result instead of
raising them. They are still ``ValueError`` subclasses, so callers who prefer
exceptions can simply ``raise`` what they get back.

Each error keeps its fields in ``args``, so errors copy and pickle like any
other exception. The fields are read-only.
"""

from typing import TYPE_CHECKING

from ..utils.clean import clean_string

if TYPE_CHECKING:
    from .name import Name

ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\a': '\\a',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\v': '\\v',
}


def _escape(ch: str) -> str:
    if ch in ESCAPES:
        return ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Render a string double-quoted, escaping anything not printable.

    Invisible characters such as tabs or no-break spaces show up as escapes
    (" \\t ", "\\u00a0"), so a blank argument is always recognizable.
    """
    return '"' + ''.join(_escape(ch) for ch in text) + '"'


class RelnameError(ValueError):
    """Base class for every error reported by relname."""

    def __init__(self, *fields) -> None:
        super().__init__(*fields)

    def __setattr__(self, name, value):
        if name == 'args':
            raise AttributeError(f"Cannot modify immutable error {type(self).__name__}")
        super().__setattr__(name, value)

    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EmptyPartError(RelnameError):
    """A name part given to new_name1/2/3 was empty or whitespace-only.

    An arity of 0 never comes from a real call and is reported as a bug. Any
    arity other than 1 or 2 shows all three arguments.

    Attributes:
        num_args: Arity of the constructor that failed (1, 2 or 3)
        arg1: Raw first argument
        arg2: Raw second argument ('' when not supplied)
        arg3: Raw third argument ('' when not supplied)
    """

    def __init__(self, num_args: int = 0, arg1: str = '', arg2: str = '', arg3: str = '') -> None:
        super().__init__(num_args, arg1, arg2, arg3)

    num_args = property(lambda self: self.args[0])
    arg1 = property(lambda self: self.args[1])
    arg2 = property(lambda self: self.args[2])
    arg3 = property(lambda self: self.args[3])

    def __repr__(self) -> str:
        return (f"EmptyPartError(num_args={self.num_args!r}, arg1={self.arg1!r}, "
                f"arg2={self.arg2!r}, arg3={self.arg3!r})")

    def supplied_args(self) -> tuple:
        """The raw arguments the failing constructor was given."""
        if self.num_args == 0:
            return ()
        count = self.num_args if self.num_args in (1, 2) else 3
        return self.args[1:count + 1]

    def blank_args(self) -> list:
        """Positions (1-based) of the supplied arguments that were blank."""
        return [i for i, arg in enumerate(self.supplied_args(), start=1) if clean_string(arg) == '']

    def message(self) -> str:
        if self.num_args == 0:
            return f"BUG: bad EmptyPartError value {self!r}"

        plural = '' if len(self.blank_args()) == 1 else 's'
        rendered = ', '.join(quote(arg) for arg in self.supplied_args())
        return (f"empty or whitespace-only argument{plural} in "
                f"new_name{self.num_args}({rendered})")


class BadRelatorCode(RelnameError):
    """new_related_name was given a relator code that is not three letters a-z."""

    def __init__(self, name: 'Name', code: str) -> None:
        super().__init__(name, code)

    name = property(lambda self: self.args[0])
    code = property(lambda self: self.args[1])

    def __repr__(self) -> str:
        return f"BadRelatorCode(name={self.name!r}, code={self.code!r})"

    def message(self) -> str:
        return (f"new_related_name({quote(self.name.common())},{quote(self.code)}): "
                f"need /^[a-z]{{3}}$/ for 2nd arg")


class BadName(RelnameError):
    """new_related_name was given the zero-valued Name."""

    def __init__(self, code: str) -> None:
        super().__init__(code)

    code = property(lambda self: self.args[0])

    def __repr__(self) -> str:
        return f"BadName(code={self.code!r})"

    def message(self) -> str:
        return f"new_related_name(Name(),{quote(self.code)}): need a non-zero-value Name"
