# src/highdupe/syntax.py

"""LaTeX syntax tables shared by segmentation and duplicate detection.

Both sides must agree on what counts as prose: the segmenter deletes or
unwraps commands before tokenizing, and the detector uses the same tables to
reject matches in the original line that the segmenter never counted.
"""

import re

COMMENT_MARKER = "%"

# Math-like and tabular environments whose content is never prose.
EXCLUDED_ENVIRONMENTS = (
    "equation",
    "align",
    "gather",
    "multline",
    "flalign",
    "alignat",
    "eqnarray",
    "displaymath",
    "math",
    "table",
    "tabular",
    "tabularx",
    "longtable",
)

BIBLIOGRAPHY_ENVIRONMENTS = ("thebibliography", "bibliography")

# Commands removed together with their argument.
REFERENCE_COMMANDS = (
    "cite",
    "citep",
    "citet",
    "citeauthor",
    "citeyear",
    "parencite",
    "textcite",
    "autocite",
    "nocite",
    "label",
    "ref",
    "pageref",
    "eqref",
    "autoref",
    "cref",
    "Cref",
)

# Commands replaced by their argument.
FORMATTING_COMMANDS = (
    "textbf",
    "textit",
    "emph",
    "underline",
    "textsc",
    "texttt",
    "textsf",
    "textrm",
    "textsl",
    "footnote",
)

SECTIONING_COMMANDS = (
    "part",
    "chapter",
    "section",
    "subsection",
    "subsubsection",
    "paragraph",
    "subparagraph",
)

# Commands whose braced argument is kept as prose.
PROSE_COMMANDS = frozenset(FORMATTING_COMMANDS + SECTIONING_COMMANDS)


def _environment_pattern(marker: str, names: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(names)
    return re.compile(rf"\\{marker}\{{((?:{alternatives})\*?)\}}")


EXCLUDED_BEGIN = _environment_pattern("begin", EXCLUDED_ENVIRONMENTS)
EXCLUDED_END = _environment_pattern("end", EXCLUDED_ENVIRONMENTS)
BIBLIOGRAPHY_BEGIN = _environment_pattern("begin", BIBLIOGRAPHY_ENVIRONMENTS)
BIBLIOGRAPHY_END = _environment_pattern("end", BIBLIOGRAPHY_ENVIRONMENTS)

# Any \begin{...} or \end{...}; group 1 is the environment name.
ENVIRONMENT_MARKER = re.compile(r"\\(?:begin|end)\{([^}]*)\}")

UNESCAPED_COMMENT = re.compile(r"(?<!\\)%")
TRAILING_COMMENT = re.compile(r"(?<!\\)%.*$")

# $$...$$, $...$, \(...\), \[...\]; shortest match.
MATH_SPAN = re.compile(r"\$\$.*?\$\$|(?<!\\)\$.*?(?<!\\)\$|\\\(.*?\\\)|\\\[.*?\\\]")

REFERENCE_COMMAND = re.compile(
    rf"\\(?:{'|'.join(REFERENCE_COMMANDS)})\*?(?:\[[^\]]*\])*\{{[^}}]*\}}"
)
FORMATTING_COMMAND = re.compile(
    rf"\\(?:{'|'.join(FORMATTING_COMMANDS)})\{{([^{{}}]*)\}}"
)
SECTIONING_COMMAND = re.compile(
    rf"\\(?:{'|'.join(SECTIONING_COMMANDS)})\*?(?:\[[^\]]*\])?\{{([^{{}}]*)\}}"
)

# Opening of a command argument; group 1 is the command name.
COMMAND_OPENING = re.compile(r"\\([A-Za-z]+)\*?(?:\[[^\]]*\])*\{")

PARAGRAPH_BREAK = re.compile(r"\\par(?![A-Za-z])")


def is_comment_line(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_MARKER)


def has_region_delimiter(line: str) -> bool:
    """True if the line opens or closes a math or table environment."""
    return bool(EXCLUDED_BEGIN.search(line) or EXCLUDED_END.search(line))


def region_depth(line: str, name: str, depth: int = 1, pos: int = 0) -> int:
    """Nesting depth of environment ``name`` after the markers on ``line``.

    Only ``\\begin{name}`` and ``\\end{name}`` count, so a nested environment
    of another kind never closes the region. Zero means the region is closed.
    """
    marker = re.compile(rf"\\(begin|end)\{{{re.escape(name)}\}}")
    code = TRAILING_COMMENT.sub("", line)
    for match in marker.finditer(code, pos):
        depth += 1 if match.group(1) == "begin" else -1
        if depth == 0:
            break
    return depth


def has_paragraph_break(text: str) -> bool:
    return PARAGRAPH_BREAK.search(text) is not None


def comment_start(line: str) -> int | None:
    match = UNESCAPED_COMMENT.search(line)
    return match.start() if match else None


def _unwrap(pattern: re.Pattern[str], line: str) -> str:
    # Innermost first, until nested commands are all unwrapped.
    while True:
        rewritten = pattern.sub(r"\1", line)
        if rewritten == line:
            return rewritten
        line = rewritten


def rewrite_line(line: str) -> str:
    """Reduce one LaTeX source line to its prose content."""
    line = TRAILING_COMMENT.sub("", line)
    line = MATH_SPAN.sub("", line)
    line = REFERENCE_COMMAND.sub("", line)
    line = _unwrap(FORMATTING_COMMAND, line)
    line = _unwrap(SECTIONING_COMMAND, line)
    return line
