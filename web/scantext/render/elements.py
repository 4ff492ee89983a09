"""
Render elements for formatted text.

An element is a plain dict with a ``type`` and the inputs of that type. Each
type declares its defaults and a list of pre-render callbacks; rendering runs
the callbacks in order and returns the resulting ``markup``.

  processed_text : text run through its text format
  scan_text      : processed text with mentions of sibling entities hyperlinked
"""
import re

from flask import current_app
from loguru import logger
from markupsafe import Markup

from ..exceptions import ScanTextError, UnknownTextFormatError
from ..services.candidate_directory import get_candidates
from ..services.text_formats import check_markup
from ..services.urls import canonical_url_builder
from ..utils.entity_links import link_entities


def pre_render_text(element):
    """Apply the element's text format and store the result in ``markup``."""
    text_format = element['format'] or current_app.config['DEFAULT_TEXT_FORMAT']

    try:
        markup = check_markup(element['text'], text_format, element['langcode'], element['filter_types_to_skip'])
    except UnknownTextFormatError as e:
        fallback = current_app.config['FALLBACK_TEXT_FORMAT']
        logger.warning(f"{e} - rendering with {fallback}")
        markup = check_markup(element['text'], fallback, element['langcode'], element['filter_types_to_skip'])

    element['markup'] = markup
    return element


def pre_render_scan_text(element):
    """Hyperlink names of sibling entities in the processed text.

    Matching runs on the raw ``text``; the links go into ``markup``. If linking
    fails the field keeps the unlinked markup.
    """
    element = pre_render_text(element)

    entity = element['entity']
    if entity is None:
        return element

    try:
        candidates = get_candidates(entity)
        element['markup'] = Markup(link_entities(
            element['text'],
            element['markup'],
            candidates,
            canonical_url_builder(entity.entity_type_id),
            link_class=current_app.config.get('SCAN_TEXT_LINK_CLASS'),
        ))
    except (re.error, ScanTextError) as e:
        logger.error(f"Error linking entities in {entity!r}: {e}")

    return element


ELEMENT_INFO = {
    'processed_text': {
        'text': '',
        'format': None,
        'filter_types_to_skip': [],
        'langcode': '',
        'pre_render': [pre_render_text],
    },
    'scan_text': {
        'text': '',
        'format': None,
        'filter_types_to_skip': [],
        'langcode': '',
        'entity': None,
        'pre_render': [pre_render_scan_text],
    },
}


def element_info(element_type):
    """Get a fresh copy of the defaults of an element type."""
    info = ELEMENT_INFO[element_type]
    return {key: list(value) if isinstance(value, list) else value for key, value in info.items()}


def render_element(element):
    """Render an element dict to Markup.

    Args:
        element: Dict with at least ``type``; missing keys take the type's defaults

    Returns:
        Markup of the rendered element
    """
    prepared = element_info(element['type'])
    prepared.update(element)

    for callback in prepared['pre_render']:
        prepared = callback(prepared)

    return prepared.get('markup', Markup(''))
