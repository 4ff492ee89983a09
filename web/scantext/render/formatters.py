"""Field formatters - build render elements for the text fields of an entity."""
from markupsafe import Markup

from .elements import render_element

TEXT_FIELD_TYPES = ('text', 'text_long', 'text_with_summary')


class FieldFormatter:
    """Base formatter.

    Subclasses set ``formatter_id``, ``label`` and ``element_type``.
    """
    formatter_id = None
    label = None
    description = None
    element_type = 'processed_text'
    field_types = TEXT_FIELD_TYPES

    def view_elements(self, entity, field_name, langcode=None):
        """Build the render elements for one field of an entity.

        Args:
            entity: Content entity holding the field
            field_name: Text field; its format is read from ``<field_name>_format``
            langcode: Display language, defaults to the entity's

        Returns:
            List of element dicts (empty when the field has no value)
        """
        value = getattr(entity, field_name)
        if value is None:
            return []

        return [{
            'type': self.element_type,
            'text': value,
            'format': getattr(entity, f'{field_name}_format', None),
            'langcode': langcode or getattr(entity, 'langcode', '') or '',
        }]

    @classmethod
    def is_applicable(cls, field_definition):
        return field_definition is not None and field_definition.field_type in cls.field_types

    def render(self, entity, field_name, langcode=None):
        """Render all elements of a field to a single Markup string."""
        return Markup('').join(render_element(element) for element in self.view_elements(entity, field_name, langcode))


class TextDefaultFormatter(FieldFormatter):
    formatter_id = 'text_default'
    label = 'Default'
    element_type = 'processed_text'


class ScanTextFormatter(FieldFormatter):
    """Hyperlink automatically terms from the description to other terms from the vocabulary."""
    formatter_id = 'scan_text_default'
    label = 'Hyperlink related terms'
    description = 'Hyperlink automatically terms from the description to other terms from the vocabulary'
    element_type = 'scan_text'

    def view_elements(self, entity, field_name, langcode=None):
        elements = super().view_elements(entity, field_name, langcode)
        for element in elements:
            element['entity'] = entity
        return elements

    @classmethod
    def is_applicable(cls, field_definition):
        return (
            super().is_applicable(field_definition)
            and field_definition.entity_type_id == 'taxonomy_term'
        )


FORMATTERS = {
    formatter.formatter_id: formatter
    for formatter in (TextDefaultFormatter, ScanTextFormatter)
}


def get_formatter(formatter_id):
    """Get a formatter instance by id, or None if unknown."""
    formatter = FORMATTERS.get(formatter_id)
    return formatter() if formatter else None


def get_applicable_formatters(field_definition):
    """Ids of all formatters that can display a field."""
    return [
        formatter_id for formatter_id, formatter in FORMATTERS.items()
        if formatter.is_applicable(field_definition)
    ]
