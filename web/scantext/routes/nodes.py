"""Node routes - content pages and the edit form"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app
from loguru import logger
from scantext.models import Node, Term
from scantext.extensions import db
from scantext.services.text_formats import TEXT_FORMATS
from scantext.utils.widgets import parse_selected_ids, term_reference_widget

bp = Blueprint('nodes', __name__)


@bp.route('/<int:node_id>')
def node_detail(node_id):
    """Canonical node page"""
    node = db.first_or_404(db.select(Node).filter_by(nid=node_id, status=True))

    return render_template('nodes/node.html', node=node)


@bp.route('/<int:node_id>/edit', methods=['GET', 'POST'])
def edit_node(node_id):
    """Node edit form.

    The tags widget carries the ids of the already-selected terms so the
    picker can leave them out of its suggestions.
    """
    node = db.get_or_404(Node, node_id)
    vocabulary = current_app.config['NODE_TAGS_VOCABULARY']

    if request.method == 'POST':
        try:
            title = request.form.get('title', '').strip()
            body = request.form.get('body', '')
            body_format = request.form.get('body_format') or current_app.config['DEFAULT_TEXT_FORMAT']
            tag_ids = parse_selected_ids(request.form.get('tags', ''))

            # Validation
            if not title:
                flash('Title is required', 'error')
                return redirect(url_for('nodes.edit_node', node_id=node_id))

            if body_format not in TEXT_FORMATS:
                flash(f'Unknown text format: {body_format}', 'error')
                return redirect(url_for('nodes.edit_node', node_id=node_id))

            node.title = title
            node.body = body
            node.body_format = body_format
            node.status = request.form.get('status') == '1'
            node.tags = (
                db.session.query(Term)
                .filter(Term.tid.in_(tag_ids), Term.vid == vocabulary)
                .all()
            ) if tag_ids else []

            db.session.commit()

            flash(f'Node "{title}" saved', 'success')
            logger.info(f'Node saved: {node.nid} - {title}')

            return redirect(url_for('nodes.edit_node', node_id=node_id))

        except Exception as e:
            db.session.rollback()
            logger.error(f'Error saving node {node_id}: {str(e)}')
            flash(f'Error saving node: {str(e)}', 'error')
            return redirect(url_for('nodes.edit_node', node_id=node_id))

    # GET request - show form
    tags_widget = term_reference_widget('tags', node.tags, vocabulary)
    return render_template(
        'nodes/edit.html',
        node=node,
        tags_widget=tags_widget,
        text_formats=TEXT_FORMATS.values()
    )
