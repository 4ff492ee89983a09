"""Text formats - turn stored free text into HTML before it is displayed.

A text format is an ordered list of filters. Each filter has a type so a
render element can skip, for example, the HTML-escaping step for trusted
text. Supported formats:
  - plain_text : escape HTML, then paragraphs and line breaks
  - markdown   : rendered via mistune (escaping raw HTML)
  - full_html  : trusted HTML, only paragraphs and line breaks added
"""
import re
from collections import namedtuple

import mistune
from markupsafe import Markup, escape

from ..exceptions import UnknownTextFormatError

# Filter types
TYPE_HTML_RESTRICTOR = 'html_restrictor'
TYPE_MARKUP_LANGUAGE = 'markup_language'

TextFilter = namedtuple('TextFilter', ['name', 'type', 'process'])
TextFormat = namedtuple('TextFormat', ['format_id', 'name', 'filters'])

_BLOCK_TAG = re.compile(r'^\s*<(p|div|h[1-6]|ul|ol|li|pre|blockquote|table|hr)[\s>/]', re.IGNORECASE)

_markdown = mistune.create_markdown(escape=True, plugins=['strikethrough', 'table', 'url'])


def html_escape(text, langcode=''):
    return str(escape(text))


def autop(text, langcode=''):
    """Wrap blank-line separated chunks in <p> and turn single newlines into <br>."""
    text = text.replace('\r\n', '\n').replace('\r', '\n').strip()
    if not text:
        return ''

    chunks = []
    for chunk in re.split(r'\n\s*\n', text):
        chunk = chunk.strip()
        if not chunk:
            continue
        # Leave block-level markup alone
        if _BLOCK_TAG.match(chunk):
            chunks.append(chunk)
        else:
            chunks.append('<p>' + chunk.replace('\n', '<br>\n') + '</p>')

    return '\n'.join(chunks)


def markdown(text, langcode=''):
    return _markdown(text).strip()


TEXT_FORMATS = {
    'plain_text': TextFormat('plain_text', 'Plain text', [
        TextFilter('filter_html_escape', TYPE_HTML_RESTRICTOR, html_escape),
        TextFilter('filter_autop', TYPE_MARKUP_LANGUAGE, autop),
    ]),
    'markdown': TextFormat('markdown', 'Markdown', [
        TextFilter('filter_markdown', TYPE_MARKUP_LANGUAGE, markdown),
    ]),
    'full_html': TextFormat('full_html', 'Full HTML', [
        TextFilter('filter_autop', TYPE_MARKUP_LANGUAGE, autop),
    ]),
}


def get_text_format(format_id):
    """Get a registered text format.

    Raises:
        UnknownTextFormatError: If the format is not registered
    """
    try:
        return TEXT_FORMATS[format_id]
    except KeyError:
        raise UnknownTextFormatError(f"Unknown text format: {format_id}") from None


def check_markup(text, format_id, langcode='', filter_types_to_skip=()):
    """Run text through all filters of a text format.

    Args:
        text: Raw text
        format_id: Text format id (plain_text, markdown, full_html)
        langcode: Language of the text, passed to every filter
        filter_types_to_skip: Filter types not to run

    Returns:
        Markup with the processed HTML
    """
    text_format = get_text_format(format_id)
    processed = text or ''

    for text_filter in text_format.filters:
        if text_filter.type in filter_types_to_skip:
            continue
        processed = text_filter.process(processed, langcode)

    return Markup(processed)
