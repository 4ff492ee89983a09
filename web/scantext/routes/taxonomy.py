"""Taxonomy routes - vocabularies, terms and the term picker API"""
from flask import Blueprint, render_template, request, jsonify, current_app
from scantext.models import Vocabulary, Term
from scantext.extensions import db
from scantext.utils.widgets import parse_selected_ids

bp = Blueprint('taxonomy', __name__)


@bp.route('/<vid>')
def vocabulary_detail(vid):
    """Vocabulary page - published terms ordered by weight and name"""
    vocabulary = db.first_or_404(db.select(Vocabulary).filter_by(vid=vid))
    page = request.args.get('page', 1, type=int)

    terms = db.paginate(
        db.select(Term)
        .filter(Term.vid == vid, Term.status == True)
        .order_by(Term.weight, Term.name),
        page=page,
        per_page=current_app.config['ITEMS_PER_PAGE'],
        error_out=False,
    )

    return render_template('taxonomy/vocabulary.html', vocabulary=vocabulary, terms=terms)


@bp.route('/term/<int:term_id>')
def term_detail(term_id):
    """Canonical term page.

    The description is rendered through the configured formatter, which links
    mentions of the other terms of the vocabulary.
    """
    term = db.first_or_404(db.select(Term).filter_by(tid=term_id, status=True))

    return render_template('taxonomy/term.html', term=term)


@bp.route('/autocomplete/<vid>')
def autocomplete(vid):
    """Term picker endpoint.

    Query parameters:
        q: Search string (partial name match)
        selected: '+'-joined ids of terms already picked; excluded from results
        limit: Maximum number of results (default 10)

    Returns: JSON list of {tid, name}
    """
    query = request.args.get('q', '').strip()
    limit = request.args.get('limit', 10, type=int)
    selected = parse_selected_ids(request.args.get('selected', ''))

    if not query or len(query) < 2:
        return jsonify([])

    terms_query = (
        db.session.query(Term)
        .filter(
            Term.vid == vid,
            Term.status == True,
            Term.name.ilike(f'%{query}%')
        )
    )
    if selected:
        terms_query = terms_query.filter(Term.tid.not_in(selected))

    terms = terms_query.order_by(Term.name).limit(limit).all()

    results = [
        {
            'tid': t.tid,
            'name': t.name,
        }
        for t in terms
    ]

    return jsonify(results)
