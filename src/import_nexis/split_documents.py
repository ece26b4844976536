"""Parse normalized markup and pick out the article containers."""

from lxml import etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from import_nexis.exceptions import UnparseableMarkupError
from import_nexis.normalize_markup import DOC_ID_PREFIX

ARTICLE_XPATH = f'//doc[starts-with(@id, "{DOC_ID_PREFIX}")]'


def parse_markup(markup: str) -> HtmlElement:
    """Build a document tree with libxml2's recovering HTML parser."""
    parser = lxml_html.HTMLParser(encoding="utf-8")
    try:
        return lxml_html.document_fromstring(markup.encode("utf-8"), parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError) as exc:
        raise UnparseableMarkupError(f"Could not parse markup: {exc}") from exc


def split_articles(root: HtmlElement) -> list[HtmlElement]:
    """Return the article containers in document order."""
    return root.xpath(ARTICLE_XPATH)


def split_documents(markup: str) -> list[HtmlElement]:
    return split_articles(parse_markup(markup))
