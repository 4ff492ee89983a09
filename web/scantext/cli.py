"""Flask CLI commands"""
import click
from loguru import logger

from .extensions import db


def register_commands(app):
    """Register CLI commands with Flask app"""

    @app.cli.command('init-db')
    @click.option('--drop', is_flag=True, help='Drop existing tables first')
    def init_database(drop):
        """Initialize database schema"""
        from . import models  # register all tables

        if drop:
            logger.warning("Dropping all tables")
            db.drop_all()
        db.create_all()
        click.echo("✓ Database schema created")

    @app.cli.command('scan-term')
    @click.argument('term_id', type=int)
    @click.option('--formatter', '-f', default='scan_text_default', help='Field formatter to render with')
    def scan_term(term_id, formatter):
        """Print the rendered description of a term"""
        from .models import Term
        from .render import get_formatter

        term = db.session.get(Term, term_id)
        if term is None:
            raise click.ClickException(f"Term {term_id} not found")

        field_formatter = get_formatter(formatter)
        if field_formatter is None:
            raise click.ClickException(f"Unknown formatter: {formatter}")

        logger.info(f"Rendering description of term {term_id} with {formatter}")
        # Links are built with url_for, which needs a request context
        with app.test_request_context():
            click.echo(field_formatter.render(term, 'description'))
