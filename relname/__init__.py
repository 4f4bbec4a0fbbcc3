"""relname - Names of people and organizations in common and file-as form."""

__version__ = "0.1.0"

from .core.errors import BadName, BadRelatorCode, EmptyPartError, RelnameError
from .core.name import EMPTY_NAME, Name, new_name, new_name1, new_name2, new_name3
from .core.related_name import EMPTY_RELATED_NAME, RelatedName, new_related_name
from .utils.clean import clean_string

__all__ = [
    'Name',
    'EMPTY_NAME',
    'new_name',
    'new_name1',
    'new_name2',
    'new_name3',
    'RelatedName',
    'EMPTY_RELATED_NAME',
    'new_related_name',
    'clean_string',
    'RelnameError',
    'EmptyPartError',
    'BadRelatorCode',
    'BadName',
]
