"""Shared fixtures: a testing app with an in-memory database and seed taxonomy."""
import sys
from pathlib import Path

import pytest

# Add web directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scantext import create_app
from scantext.extensions import db, cache
from scantext.models import Vocabulary, Term, Node


TOPIC_TERMS = [
    # tid, name, status
    (1, 'Climate Council', True),
    (2, 'Meeting', True),
    (3, 'WTO', True),
    (4, 'Global Biodiversity Forum', True),
    (5, 'UN-Habitat', True),
    (6, 'Draft Term', False),
    (7, 'Climate', True),
]

CLIMATE_COUNCIL_DESCRIPTION = (
    "The Climate Council met at the WTO meeting.\n"
    "It reported to the Global Biodiversity Forum and UN-Habitat. "
    "A Draft Term stays unlinked."
)


def seed(session):
    session.add_all([
        Vocabulary(vid='topics', name='Topics', weight=0),
        Vocabulary(vid='tags', name='Tags', weight=1),
    ])

    for tid, name, status in TOPIC_TERMS:
        description = CLIMATE_COUNCIL_DESCRIPTION if tid == 1 else f"About {name}."
        session.add(Term(tid=tid, vid='topics', name=name, status=status,
                         description=description, description_format='plain_text'))

    session.add_all([
        Term(tid=10, vid='tags', name='Energy', status=True),
        Term(tid=11, vid='tags', name='Water', status=True),
        Node(nid=1, type='article', title='Ozone report', status=True,
             body='The Climate Council is not a tag here.', body_format='plain_text'),
    ])
    session.commit()


@pytest.fixture
def app():
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        seed(db.session)
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def cached_app(app):
    """The testing app with a real in-process cache instead of NullCache."""
    cache.init_app(app, config={'CACHE_TYPE': 'SimpleCache'})
    cache.clear()
    yield app
    cache.clear()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def request_context(app):
    with app.test_request_context():
        yield
