import re
from typing import Any, Optional

from quizline.errors import MissingParameterError, NotANumberError

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def validate_id(value: Optional[Any], name: str = 'id') -> int:
    """Parse a raw identifier into an int.

    Reads the leading integer, so ``"7abc"`` and ``"7.5"`` both give 7.
    Raises MissingParameterError when ``value`` is None and NotANumberError
    when it does not start with an integer.
    """
    if value is None:
        raise MissingParameterError(f'Missing parameter <{name}>.')
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise NotANumberError(f'The value of parameter <{name}> is not a number.')
    return int(match.group(1))
