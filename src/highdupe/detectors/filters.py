# src/highdupe/detectors/filters.py

"""Predicates that reject a word match which is markup rather than prose.

Each filter takes ``(line, start, end)`` for a match ``line[start:end]`` and
returns True when the match must be dropped. Filters are independent of one
another and of any environment state across lines.
"""

from collections.abc import Callable, Sequence

from highdupe import syntax
from highdupe.segmentation import FileType

MatchFilter = Callable[[str, int, int], bool]


def is_command_name(line: str, start: int, end: int) -> bool:
    """``\\word``: the match is the name of a command."""
    return start > 0 and line[start - 1] == "\\"


def is_environment_name(line: str, start: int, end: int) -> bool:
    """The match lies in the name of ``\\begin{...}`` or ``\\end{...}``."""
    for marker in syntax.ENVIRONMENT_MARKER.finditer(line):
        if marker.start(1) <= start and end <= marker.end(1):
            return True
    return False


def is_command_argument(line: str, start: int, end: int) -> bool:
    """The match lies in the braced argument of a non-prose command.

    The innermost command opened before the match with no closing brace in
    between decides; arguments of formatting and sectioning commands are
    prose and are kept.
    """
    enclosing = None
    for opening in syntax.COMMAND_OPENING.finditer(line, 0, start):
        if "}" not in line[opening.end() : start]:
            enclosing = opening
    if enclosing is None:
        return False
    return enclosing.group(1) not in syntax.PROSE_COMMANDS


def is_after_comment(line: str, start: int, end: int) -> bool:
    comment = syntax.comment_start(line)
    return comment is not None and comment < start


def is_inline_math(line: str, start: int, end: int) -> bool:
    for span in syntax.MATH_SPAN.finditer(line):
        if span.start() <= start and end <= span.end():
            return True
        if span.start() > start:
            break
    return False


LATEX_FILTERS: tuple[MatchFilter, ...] = (
    is_command_name,
    is_environment_name,
    is_command_argument,
    is_after_comment,
    is_inline_math,
)


def filters_for(file_type: FileType) -> tuple[MatchFilter, ...]:
    if file_type == "latex":
        return LATEX_FILTERS
    return ()


def is_rejected(
    line: str, start: int, end: int, filters: Sequence[MatchFilter]
) -> bool:
    return any(reject(line, start, end) for reject in filters)
