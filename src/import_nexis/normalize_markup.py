"""Repair the known malformations of Nexis HTML exports.

Nexis wraps parts of each export in a comment meant to hide the XML section
from browsers, and repeats the same ``<DOC NUMBER=1>`` marker for every
article. The rewrites below are plain substring replacements applied line by
line, in order, so that libxml2 can build a tree with one uniquely identified
``doc`` element per article.
"""

import itertools
from typing import Callable, Iterable, Iterator

HIDE_SECTION_COMMENT = "<!-- Hide XML section from browser"
DOC_MARKER = "<DOC NUMBER=1>"
DOC_ID_PREFIX = "doc_id_"


def doc_tag(doc_id: int) -> str:
    return f'<DOC ID="{DOC_ID_PREFIX}{doc_id}">'


def strip_hide_section_comment(line: str) -> str:
    return line.replace(HIDE_SECTION_COMMENT, "")


def close_docfull_comment(line: str) -> str:
    return line.replace("<DOCFULL> -->", "<DOCFULL>")


def close_doc_comment(line: str) -> str:
    return line.replace("</DOC> -->", "</DOC>")


def space_line_breaks(line: str) -> str:
    """Put a space after <BR> so text on either side is not glued together."""
    return line.replace("<BR>", "<BR> ")


def number_doc_markers(line: str, counter: Iterator[int]) -> str:
    """Replace every article marker with a ``doc`` tag taking the next id."""
    if DOC_MARKER not in line:
        return line
    parts = line.split(DOC_MARKER)
    rewritten = [parts[0]]
    for part in parts[1:]:
        rewritten.append(doc_tag(next(counter)))
        rewritten.append(part)
    return "".join(rewritten)


# Applied in this order; marker numbering runs between the first and the
# comment-closing rewrites.
LINE_FIXES_BEFORE_NUMBERING: tuple[Callable[[str], str], ...] = (
    strip_hide_section_comment,
)
LINE_FIXES_AFTER_NUMBERING: tuple[Callable[[str], str], ...] = (
    close_docfull_comment,
    close_doc_comment,
    space_line_breaks,
)


def fix_nexis_html(lines: Iterable[str]) -> list[str]:
    """Apply all rewrites to each line. Article ids start at 0 per call."""
    counter = itertools.count()
    fixed = []
    for line in lines:
        for fix in LINE_FIXES_BEFORE_NUMBERING:
            line = fix(line)
        line = number_doc_markers(line, counter)
        for fix in LINE_FIXES_AFTER_NUMBERING:
            line = fix(line)
        fixed.append(line)
    return fixed


def normalize_markup(lines: Iterable[str]) -> str:
    """Fix a file's lines and join them into one parseable markup string."""
    return "\n".join(fix_nexis_html(lines))
