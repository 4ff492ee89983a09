"""Tests for render elements, field formatters and the render_field template filter"""
from scantext.entity_types import EntityTypeConfig, register_entity_type, get_entity_type
from scantext.extensions import db
from scantext.models import Term, Node
from scantext.render import (
    ScanTextFormatter,
    TextDefaultFormatter,
    element_info,
    get_applicable_formatters,
    get_formatter,
    render_element,
)
from scantext.utils.formatters import resolve_formatter_id


def test_element_info_is_a_copy():
    info = element_info('scan_text')
    info['filter_types_to_skip'].append('html_restrictor')

    assert element_info('scan_text')['filter_types_to_skip'] == []
    assert element_info('scan_text')['entity'] is None


def test_processed_text_element(app, request_context):
    markup = render_element({'type': 'processed_text', 'text': 'A Meeting', 'format': 'plain_text'})

    assert str(markup) == '<p>A Meeting</p>'


def test_unknown_format_falls_back(app, request_context):
    markup = render_element({'type': 'processed_text', 'text': '<b>A</b>', 'format': 'filtered_html'})

    assert str(markup) == '<p>&lt;b&gt;A&lt;/b&gt;</p>'


def test_scan_text_element_links_siblings(app, request_context):
    term = db.session.get(Term, 2)

    markup = render_element({
        'type': 'scan_text',
        'text': 'The Climate Council and the WTO discussed the Meeting.',
        'format': 'plain_text',
        'entity': term,
    })

    assert str(markup) == (
        '<p>The <a href="/taxonomy/term/1">Climate Council</a> and the '
        '<a href="/taxonomy/term/3">WTO</a> discussed the Meeting.</p>'
    )


def test_scan_text_element_without_entity(app, request_context):
    markup = render_element({'type': 'scan_text', 'text': 'The WTO', 'format': 'plain_text'})

    assert str(markup) == '<p>The WTO</p>'


def test_scan_text_link_class(app, request_context):
    app.config['SCAN_TEXT_LINK_CLASS'] = 'term-link'
    term = db.session.get(Term, 2)

    markup = render_element({'type': 'scan_text', 'text': 'the WTO', 'format': 'plain_text', 'entity': term})

    assert str(markup) == '<p>the <a href="/taxonomy/term/3" class="term-link">WTO</a></p>'


def test_scan_text_without_canonical_route(app, request_context):
    """Entities whose canonical route is missing render without links"""
    original = get_entity_type('taxonomy_term')
    register_entity_type(original._replace(canonical_endpoint='taxonomy.missing'))
    try:
        markup = render_element({
            'type': 'scan_text', 'text': 'the WTO', 'format': 'plain_text', 'entity': db.session.get(Term, 2),
        })
    finally:
        register_entity_type(original)

    assert str(markup) == '<p>the WTO</p>'


def test_formatter_applicability():
    description = Term.get_field_definition('description')
    body = Node.get_field_definition('body')

    assert ScanTextFormatter.is_applicable(description)
    assert not ScanTextFormatter.is_applicable(body)
    assert TextDefaultFormatter.is_applicable(body)
    assert not TextDefaultFormatter.is_applicable(Term.get_field_definition('name'))
    assert get_applicable_formatters(description) == ['text_default', 'scan_text_default']


def test_get_formatter():
    assert isinstance(get_formatter('scan_text_default'), ScanTextFormatter)
    assert get_formatter('missing') is None


def test_scan_text_formatter_view_elements(app):
    term = db.session.get(Term, 1)

    elements = ScanTextFormatter().view_elements(term, 'description')

    assert elements == [{
        'type': 'scan_text',
        'text': term.description,
        'format': 'plain_text',
        'langcode': 'en',
        'entity': term,
    }]


def test_view_elements_empty_field(app):
    term = db.session.get(Term, 10)

    assert TextDefaultFormatter().view_elements(term, 'description') == []


def test_scan_text_formatter_render(app, request_context):
    html = str(ScanTextFormatter().render(db.session.get(Term, 1), 'description'))

    assert '<a href="/taxonomy/term/7">Climate</a> Council' in html
    assert '<a href="/taxonomy/term/3">WTO</a>' in html
    assert '<a href="/taxonomy/term/2">meeting</a>' in html
    assert '<a href="/taxonomy/term/4">Global Biodiversity Forum</a>' in html
    assert '<a href="/taxonomy/term/5">UN-Habitat</a>' in html
    assert 'Draft Term' in html and '/taxonomy/term/6' not in html


def test_resolve_formatter_id(app):
    assert resolve_formatter_id(db.session.get(Term, 1), 'description') == 'scan_text_default'
    assert resolve_formatter_id(db.session.get(Node, 1), 'body') == 'text_default'

    # Configured but not applicable
    app.config['FIELD_FORMATTERS'] = {'node.body': 'scan_text_default'}
    assert resolve_formatter_id(db.session.get(Node, 1), 'body') == 'text_default'


def test_entity_type_config_replace_keeps_fields():
    original = get_entity_type('taxonomy_term')

    assert isinstance(original, EntityTypeConfig)
    assert original._replace(canonical_endpoint='x').id_field == 'tid'
