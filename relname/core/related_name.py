"""Names tagged with a MARC relator code.

A relator code is three letters a-z saying how a person or organization is
connected to a creative work: 'aut' for author, 'edt' for editor, 'ill' for
illustrator and so on. The Library of Congress keeps the full list at
https://www.loc.gov/marc/relators/relaterm.html; codes are not checked
against it here.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .errors import BadName, BadRelatorCode, RelnameError
from .name import EMPTY_NAME, Name

logger = logging.getLogger(__name__)

RELATOR_PATTERN = re.compile(r'^[a-z]{3}\Z')


@dataclass(frozen=True, slots=True)
class RelatedName:
    """A Name plus a three-letter relator code.

    Build instances with new_related_name(). ``RelatedName()`` is the zero
    value returned alongside construction errors.

    Attributes:
        name: The (non-zero) name
        code: Relator code, three ASCII letters a-z
    """

    name: Name = field(default=EMPTY_NAME)
    code: str = ''

    def __post_init__(self):
        """Only the zero value may hold an empty code or an empty name."""
        if not self.name and not self.code:
            return
        if not RELATOR_PATTERN.match(self.code):
            raise ValueError(f"Invalid relator code: {self.code!r}")
        if not self.name:
            raise ValueError(f"Relator code {self.code!r} needs a non-zero Name")

    def __str__(self) -> str:
        """Return the common form followed by the code, e.g. 'Sarah A. Hoyt (aut)'."""
        return f"{self.name.common()} ({self.code})"

    def __bool__(self) -> bool:
        return bool(self.name)

    def relator(self) -> str:
        """Get the three-letter relator code."""
        return self.code

    def common(self) -> str:
        return self.name.common()

    def file_as(self) -> str:
        return self.name.file_as()

    def surname(self) -> str:
        return self.name.surname()

    def forename(self) -> str:
        return self.name.forename()

    def generation(self) -> str:
        return self.name.generation()

    def num_parts(self) -> int:
        return self.name.num_parts()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary of rendered forms, including the relator."""
        data = self.name.to_dict()
        data['relator'] = self.code
        return data


EMPTY_RELATED_NAME = RelatedName()


def new_related_name(name: Name, relator_code: str) -> Tuple[RelatedName, Optional[RelnameError]]:
    """Pair a name with a relator code.

    The code is checked first, then the name.

    Args:
        name: Name to tag; must not be the zero value
        relator_code: Three letters a-z, e.g. 'aut'

    Returns:
        (related_name, None) on success, otherwise (EMPTY_RELATED_NAME, error)
        where error is BadRelatorCode or BadName
    """
    if not RELATOR_PATTERN.match(relator_code):
        error = BadRelatorCode(name, relator_code)
        logger.debug(f"Rejected relator code: {error}")
        return EMPTY_RELATED_NAME, error

    if name.num_parts() == 0:
        bad_name = BadName(relator_code)
        logger.debug(f"Rejected related name: {bad_name}")
        return EMPTY_RELATED_NAME, bad_name

    return RelatedName(name, relator_code), None
