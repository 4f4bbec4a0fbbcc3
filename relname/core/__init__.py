"""Core name value types."""

from .errors import BadName, BadRelatorCode, EmptyPartError, RelnameError
from .name import EMPTY_NAME, Name, new_name, new_name1, new_name2, new_name3
from .related_name import EMPTY_RELATED_NAME, RELATOR_PATTERN, RelatedName, new_related_name

__all__ = [
    'Name',
    'EMPTY_NAME',
    'new_name',
    'new_name1',
    'new_name2',
    'new_name3',
    'RelatedName',
    'EMPTY_RELATED_NAME',
    'RELATOR_PATTERN',
    'new_related_name',
    'RelnameError',
    'EmptyPartError',
    'BadRelatorCode',
    'BadName',
]
