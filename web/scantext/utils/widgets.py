"""Form widget helpers for term reference fields.

The term picker excludes terms that are already selected. The selected ids
travel to the autocomplete endpoint as one '+'-joined argument, e.g. '3+12+40'.
"""


def selected_ids_argument(entities):
    """Join the ids of already-selected entities with '+'.

    Args:
        entities: Iterable of content entities (None entries are ignored)

    Returns:
        String like '3+12+40', empty when nothing is selected
    """
    return '+'.join(str(entity.id) for entity in entities if entity is not None and entity.id is not None)


def parse_selected_ids(value):
    """Inverse of selected_ids_argument; blank and non-numeric parts are ignored.

    A literal '+' in a query string arrives as a space, so both separate ids.
    """
    if not value:
        return []
    return [int(part) for part in value.replace(' ', '+').split('+') if part.strip().isdigit()]


def alter_reference_widget(element, items):
    """Add the selected ids to the picker settings of a term reference widget.

    Widgets that do not reference taxonomy terms are returned untouched.
    """
    if element.get('target_type') != 'taxonomy_term':
        return element

    settings = element.setdefault('selection_settings', {})
    settings['selected'] = selected_ids_argument(items)
    return element


def term_reference_widget(field_name, items, target_bundle):
    """Build the autocomplete widget element for a term reference field."""
    element = {
        'type': 'entity_autocomplete',
        'name': field_name,
        'target_type': 'taxonomy_term',
        'target_bundle': target_bundle,
        'default_value': list(items),
        'selection_settings': {},
    }
    return alter_reference_widget(element, items)
