import re
import sys

from bubblecons.plist import PList, plist
from bubblecons.errors import ParseError

INT_RE = re.compile(r'-?[0-9]+')


def render(xs: PList) -> str:
    # Ints past sys.get_int_max_str_digits() raise ValueError from str()
    return ','.join(str(x) for x in xs)


def print_list(xs: PList, file=None):
    if file is None:
        file = sys.stdout
    print(render(xs), file=file)


def parse(text: str) -> PList[int]:
    """
    Read a list back from the format render() writes, eg "3,7,-1".

    Whitespace around each value is ignored and blank text is the empty
    list.  Only what render() produces for ints is accepted: an optional
    minus sign and ASCII digits, so no "+5" or "1_000".  Raises ParseError
    for anything else, with the position of the offending value.
    """
    if not text.strip():
        return plist()

    values = []
    for position, field in enumerate(text.split(',')):
        field = field.strip()
        if not INT_RE.fullmatch(field):
            raise ParseError.not_an_int(position, value=field)
        try:
            values.append(int(field))
        except ValueError:
            # more digits than sys.get_int_max_str_digits() allows
            raise ParseError.not_an_int(position, value=field) from None
    return plist(values)
