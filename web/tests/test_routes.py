"""Tests for the page routes, the term picker API and CLI commands"""
from scantext.extensions import db
from scantext.models import Node, Term


def test_index_lists_vocabularies(client):
    response = client.get('/')

    assert response.status_code == 200
    assert b'Topics' in response.data and b'Tags' in response.data


def test_vocabulary_page(client):
    response = client.get('/taxonomy/topics')

    assert response.status_code == 200
    assert b'Climate Council' in response.data
    assert b'Draft Term' not in response.data


def test_vocabulary_missing(client):
    assert client.get('/taxonomy/nope').status_code == 404


def test_term_page_links_siblings(client):
    response = client.get('/taxonomy/term/1')
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert '<a href="/taxonomy/term/7">Climate</a> Council' in html
    assert '<a href="/taxonomy/term/3">WTO</a>' in html
    assert '<a href="/taxonomy/term/2">meeting</a>' in html
    # The term never links to itself
    assert '<a href="/taxonomy/term/1">' not in html


def test_unpublished_term_not_found(client):
    assert client.get('/taxonomy/term/6').status_code == 404


def test_node_body_not_scanned(client):
    html = client.get('/node/1').get_data(as_text=True)

    assert 'The Climate Council is not a tag here.' in html
    assert '/taxonomy/term/1' not in html


def test_autocomplete_excludes_selected(client):
    response = client.get('/taxonomy/autocomplete/topics', query_string={'q': 'Cl', 'selected': '7+2'})

    assert response.get_json() == [{'tid': 1, 'name': 'Climate Council'}]


def test_autocomplete_skips_unpublished_and_short_queries(client):
    assert client.get('/taxonomy/autocomplete/topics?q=Draft').get_json() == []
    assert client.get('/taxonomy/autocomplete/topics?q=C').get_json() == []


def test_edit_form_carries_selected_ids(app, client):
    node = db.session.get(Node, 1)
    node.tags = [db.session.get(Term, 10), db.session.get(Term, 11)]
    db.session.commit()

    html = client.get('/node/1/edit').get_data(as_text=True)

    assert 'data-selected="10+11"' in html
    assert 'value="10+11"' in html


def test_edit_form_saves_tags(app, client):
    response = client.post('/node/1/edit', data={
        'title': 'Ozone report',
        'body': 'Updated',
        'body_format': 'markdown',
        'tags': '10+11+1',
        'status': '1',
    })

    assert response.status_code == 302
    node = db.session.get(Node, 1)
    # Term 1 is not in the tags vocabulary
    assert [t.tid for t in node.tags] == [10, 11]
    assert node.body_format == 'markdown'


def test_edit_form_requires_title(app, client):
    client.post('/node/1/edit', data={'title': '', 'body': 'x'})

    assert db.session.get(Node, 1).body == 'The Climate Council is not a tag here.'


def test_cli_scan_term(app):
    result = app.test_cli_runner().invoke(args=['scan-term', '1'])

    assert result.exit_code == 0
    assert '<a href="/taxonomy/term/3">WTO</a>' in result.output


def test_cli_scan_term_missing(app):
    result = app.test_cli_runner().invoke(args=['scan-term', '99'])

    assert result.exit_code != 0
    assert 'Term 99 not found' in result.output
