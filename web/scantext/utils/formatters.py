"""Custom Jinja2 template filters"""
from flask import current_app
from loguru import logger
from markupsafe import Markup

from ..render.formatters import get_formatter
from .widgets import selected_ids_argument


def resolve_formatter_id(entity, field_name):
    """Pick the display formatter configured for a field.

    Falls back to text_default when nothing is configured or the configured
    formatter cannot display the field.
    """
    configured = current_app.config['FIELD_FORMATTERS'].get(f'{entity.entity_type_id}.{field_name}')
    formatter = get_formatter(configured) if configured else None

    if formatter is None:
        return 'text_default'

    if not formatter.is_applicable(entity.get_field_definition(field_name)):
        logger.warning(f"Formatter {configured} does not apply to {entity.entity_type_id}.{field_name}")
        return 'text_default'

    return configured


def register_filters(app):
    """Register custom template filters with Flask app"""

    @app.template_filter('render_field')
    def render_field(entity, field_name, formatter_id=None):
        """Render a text field of an entity through a field formatter

        Args:
            entity: Content entity
            field_name: Name of a text field (e.g. 'description')
            formatter_id: Formatter to use, defaults to the configured one

        Returns:
            Markup for display
        """
        if entity is None:
            return Markup('')

        formatter = get_formatter(formatter_id or resolve_formatter_id(entity, field_name))
        return formatter.render(entity, field_name)

    @app.template_filter('selected_ids')
    def selected_ids(entities):
        """'+'-joined ids of referenced entities for the term picker"""
        return selected_ids_argument(entities)
