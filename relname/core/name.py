"""Name value type for people and organizations.

A Name is stored as one normalized string (the common form) plus the offsets
of the surname within it. Everything else is sliced out of that string:

    ===========  ====  ============  ============  ===================
    method       zero  one-part      two-part      three-part
    ===========  ====  ============  ============  ===================
    common()     ''    Baen Books    Dave Freer    James Tiptree Jr.
    file_as()    ''    Baen Books    Freer, Dave   Tiptree, James Jr.
    surname()    ''    Baen Books    Freer         Tiptree
    forename()   ''    ''            Dave          James
    generation() ''    ''            ''            Jr.
    num_parts()  0     1             2             3
    ===========  ====  ============  ============  ===================

Organizations and mononyms ("Teller") are one-part names, and their file-as
form is the common form. Surnames may hold several words ("Van Name"), and
'forename' is everything before the surname ("Robert A."). Generation suffixes
("Jr.", "III", "fils") are a single token.

Post-nominals ("Ph.D") and title prefixes ("Dr", "Sir") are not handled; a
title ends up as part of the forename.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..utils.clean import clean_string
from .errors import EmptyPartError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Name:
    """The name of a person or organization.

    Build instances with new_name1(), new_name2() or new_name3(). ``Name()``
    is the zero value, an absent name with no parts.

    Attributes:
        text: Common form of the name, whitespace-normalized
        surname_start: Index of the first character of the surname
        surname_end: Index just past the last character of the surname
    """

    text: str = ''
    surname_start: int = 0
    surname_end: int = 0

    def __post_init__(self):
        """Reject offset combinations that do not describe a 0-3 part name."""
        text, start, end = self.text, self.surname_start, self.surname_end
        length = len(text)

        if text != clean_string(text):
            raise ValueError(f"Name text is not normalized: {text!r}")
        if not 0 <= start <= end <= length:
            raise ValueError(f"Surname span [{start}, {end}] out of range for {text!r}")
        if start == 0 and end != length:
            raise ValueError(f"One-part name must span all of {text!r}")
        if start > 0 and (start == 1 or text[start - 1] != ' ' or start == end):
            raise ValueError(f"Surname at {start} is not preceded by a forename in {text!r}")
        if end < length and (start == 0 or end + 1 >= length or text[end] != ' '):
            raise ValueError(f"Surname at {end} is not followed by a generation in {text!r}")

    def __str__(self) -> str:
        """Return the common form."""
        return self.text

    def __bool__(self) -> bool:
        """Only the zero value is falsy."""
        return self.text != ''

    def common(self) -> str:
        """Get the common form of the name, e.g. 'David Drake'."""
        return self.text

    def file_as(self) -> str:
        """Get the file-as form of the name, e.g. 'Drake, David'.

        One-part names file as themselves. A generation suffix follows the
        forename: 'Tiptree, James Jr.'.
        """
        if self.surname_start == 0:
            return self.text

        file_as = f"{self.text[self.surname_start:self.surname_end]}, {self.text[:self.surname_start - 1]}"
        if self.surname_end < len(self.text):
            file_as += " " + self.text[self.surname_end + 1:]
        return file_as

    def surname(self) -> str:
        """Get the surname, or the whole name for one-part names.

        Returns '' only for the zero value. Surnames may contain several words.
        """
        return self.text[self.surname_start:self.surname_end]

    def forename(self) -> str:
        """Get the part before the surname ('' for zero and one-part names)."""
        if self.surname_start == 0:
            return ''
        return self.text[:self.surname_start - 1]

    def generation(self) -> str:
        """Get the generational suffix ('' unless this is a three-part name)."""
        if self.surname_end == len(self.text):
            return ''
        return self.text[self.surname_end + 1:]

    def num_parts(self) -> int:
        """Report whether this is a 1, 2 or 3 part name (0 for the zero value)."""
        if self.surname_start == 0:
            return 1 if self.text else 0
        if self.surname_end == len(self.text):
            return 2
        return 3

    def to_dict(self) -> Dict[str, Any]:
        """Convert the name to a dictionary of its rendered forms."""
        return {
            'common': self.common(),
            'file_as': self.file_as(),
            'surname': self.surname(),
            'forename': self.forename(),
            'generation': self.generation(),
            'num_parts': self.num_parts(),
        }


EMPTY_NAME = Name()


def new_name1(text: str) -> Tuple[Name, Optional[EmptyPartError]]:
    """Construct a one-part name. Use it for organizations and mononyms.

    Args:
        text: The whole name; internal whitespace is collapsed

    Returns:
        (name, None) on success, or (EMPTY_NAME, EmptyPartError) if the text
        is empty or whitespace-only
    """
    t = clean_string(text)
    if not t:
        error = EmptyPartError(1, text)
        logger.debug(f"Rejected one-part name: {error}")
        return EMPTY_NAME, error
    return Name(t, 0, len(t)), None


def new_name2(forename: str, surname: str) -> Tuple[Name, Optional[EmptyPartError]]:
    """Construct a two-part name. Use it for most people.

    Args:
        forename: Everything before the surname, e.g. 'Robert A.'
        surname: Family name, possibly several words, e.g. 'Van Name'

    Returns:
        (name, None) on success, or (EMPTY_NAME, EmptyPartError) if either
        part is empty or whitespace-only
    """
    f = clean_string(forename)
    s = clean_string(surname)
    if not f or not s:
        error = EmptyPartError(2, forename, surname)
        logger.debug(f"Rejected two-part name: {error}")
        return EMPTY_NAME, error

    text = f"{f} {s}"
    return Name(text, len(f) + 1, len(text)), None


def new_name3(forename: str, surname: str, generation: str) -> Tuple[Name, Optional[EmptyPartError]]:
    """Construct a three-part name, for people with a generational suffix.

    Args:
        forename: Everything before the surname
        surname: Family name
        generation: Single-token suffix such as 'Jr.', 'Snr' or 'III'

    Returns:
        (name, None) on success, or (EMPTY_NAME, EmptyPartError) if any part
        is empty or whitespace-only
    """
    f = clean_string(forename)
    s = clean_string(surname)
    g = clean_string(generation)
    if not f or not s or not g:
        error = EmptyPartError(3, forename, surname, generation)
        logger.debug(f"Rejected three-part name: {error}")
        return EMPTY_NAME, error

    surname_end = len(f) + 1 + len(s)
    return Name(f"{f} {s} {g}", len(f) + 1, surname_end), None


_FACTORIES = {1: new_name1, 2: new_name2, 3: new_name3}


def new_name(*parts: str) -> Tuple[Name, Optional[EmptyPartError]]:
    """Construct a name from one, two or three parts.

    Dispatches to new_name1(), new_name2() or new_name3() by the number of
    parts given.

    Raises:
        TypeError: If not given between one and three parts
    """
    factory = _FACTORIES.get(len(parts))
    if factory is None:
        raise TypeError(f"new_name() takes 1 to 3 parts but {len(parts)} were given")
    return factory(*parts)
