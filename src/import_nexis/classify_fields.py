"""Assign the blocks of one Nexis article to record fields.

Nexis articles carry no schema markers for the leading fields, so those are
picked by position among the non-empty blocks: the 2nd is the publication,
the 3rd the date line and the 4th the heading. From the 5th block on, labelled
blocks (``BYLINE: ``, ``SECTION: ``, ``LENGTH: ``) fill their fields and the
longest unlabelled block is taken as the body.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator

from lxml.html import HtmlElement

from import_nexis.models import ArticleFields, ContentBlock
from import_nexis.parse_dates import ENGLISH, DateGrammar, parse_date_phrase

FIRST_LABELLED_POSITION = 5

RESERVED_PREFIXES = (
    "BYLINE: ",
    "URL: ",
    "LOAD-DATE: ",
    "LANGUAGE: ",
    "GRAPHIC: ",
    "PUBLICATION-TYPE: ",
    "JOURNAL-CODE: ",
)


def clean_text(text: str | None) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def _digits(text: str) -> str:
    return re.sub(r"[^0-9]", "", text)


# Checked in order; the first matching label wins.
LABELLED_FIELDS: tuple[tuple[str, str, Callable[[str], str]], ...] = (
    ("BYLINE: ", "byline", str.strip),
    ("SECTION: ", "section", str.strip),
    ("LENGTH: ", "length", _digits),
)


@dataclass
class ClassifyOptions:
    paragraph_separator: str = "|"
    grammar: DateGrammar = ENGLISH
    raw_date: bool = False


def iter_blocks(article: HtmlElement) -> Iterator[ContentBlock]:
    """Yield the article's non-empty div blocks in document order."""
    for node in article.iterdescendants("div"):
        text = clean_text(node.text_content())
        if not text:
            continue
        yield ContentBlock(node=node, text=text)


def join_paragraphs(block: ContentBlock, separator: str = "|") -> str:
    """Join the block's paragraphs with `` <separator> ``.

    A block without paragraph elements gives an empty body.
    """
    paragraphs = [clean_text(p.text_content()) for p in block.node.iterdescendants("p")]
    return f" {separator} ".join(paragraphs).strip()


def is_body_candidate(text: str, length: int, longest: int) -> bool:
    """True if the block beats the longest body so far and is not a label."""
    return length > longest and not text.startswith(RESERVED_PREFIXES)


def assign_pub(fields: ArticleFields, block: ContentBlock, options: ClassifyOptions) -> None:
    fields.pub = block.text


def assign_date(fields: ArticleFields, block: ContentBlock, options: ClassifyOptions) -> None:
    if options.raw_date:
        fields.date = block.text
        return
    match = parse_date_phrase(block.text, options.grammar)
    if match is None:
        return
    fields.date = match.date
    fields.edition = match.edition


def assign_head(fields: ArticleFields, block: ContentBlock, options: ClassifyOptions) -> None:
    fields.head = block.text


POSITIONAL_FIELDS: dict[int, Callable[[ArticleFields, ContentBlock, ClassifyOptions], None]] = {
    2: assign_pub,
    3: assign_date,
    4: assign_head,
}


def classify_labelled(
    fields: ArticleFields,
    block: ContentBlock,
    options: ClassifyOptions,
    longest: int,
) -> int:
    """Classify a block past the positional ones.

    Returns the length of the longest body block seen so far.
    """
    for prefix, name, convert in LABELLED_FIELDS:
        if block.text.startswith(prefix):
            setattr(fields, name, convert(block.text[len(prefix):]))
            return longest

    if is_body_candidate(block.text, block.length, longest):
        fields.body = join_paragraphs(block, options.paragraph_separator)
        return block.length
    return longest


def classify_article(
    article: HtmlElement,
    paragraph_separator: str = "|",
    grammar: DateGrammar = ENGLISH,
    raw_date: bool = False,
) -> ArticleFields:
    """Walk an article's blocks once and fill in its fields."""
    options = ClassifyOptions(
        paragraph_separator=paragraph_separator,
        grammar=grammar,
        raw_date=raw_date,
    )
    fields = ArticleFields()
    longest = 0

    for position, block in enumerate(iter_blocks(article), start=1):
        action = POSITIONAL_FIELDS.get(position)
        if action is not None:
            action(fields, block, options)
        elif position >= FIRST_LABELLED_POSITION:
            longest = classify_labelled(fields, block, options, longest)

    return fields
