import re
from shlex import shlex

__all__ = ['quote', 'split']

# Characters that can appear in a word without quoting it.
_safe_word = re.compile(r'^[\w@%+=:,./-]+$')


def split(line):
    """Split a line of input into words the way a POSIX shell would, dropping
    any trailing `#` comment. Raises ValueError on unbalanced quotes."""
    if not isinstance(line, str):
        raise TypeError('expected a string')

    lexer = shlex(line, posix=True)
    lexer.whitespace_split = True
    return list(lexer)


def quote(value):
    if _safe_word.match(value):
        return value
    return "'" + value.replace("'", "'\\''") + "'"
