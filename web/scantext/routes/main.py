"""Main routes"""
from flask import Blueprint, render_template
from scantext.models import Vocabulary
from scantext.extensions import db

bp = Blueprint('main', __name__)


@bp.route('/')
def index():
    """Home page - list of vocabularies"""
    vocabularies = (
        db.session.query(Vocabulary)
        .order_by(Vocabulary.weight, Vocabulary.name)
        .all()
    )

    return render_template('index.html', vocabularies=vocabularies)
