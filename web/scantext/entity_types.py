"""Entity type configuration.

Each content entity category that can be scanned or linked to is described by
an explicit ``EntityTypeConfig``: which model holds it, which columns carry
its id, label, bundle and published status, and which endpoint renders its
canonical page. Models register themselves when ``scantext.models`` is
imported.
"""
from collections import namedtuple

from .exceptions import UnknownEntityTypeError

EntityTypeConfig = namedtuple('EntityTypeConfig', [
    'entity_type_id',
    'model',
    'id_field',
    'label_field',
    'bundle_field',
    'status_field',
    'canonical_endpoint',
    'route_param',
])

_registry = {}


def register_entity_type(entity_type):
    """Register an EntityTypeConfig, replacing any previous one with the same id."""
    _registry[entity_type.entity_type_id] = entity_type
    return entity_type


def get_entity_type(entity_type_id):
    """Get the configuration for an entity type id.

    Raises:
        UnknownEntityTypeError: If nothing is registered under the id
    """
    try:
        return _registry[entity_type_id]
    except KeyError:
        raise UnknownEntityTypeError(f"Unknown entity type: {entity_type_id}") from None


def get_entity_types():
    """All registered entity types, keyed by id."""
    return dict(_registry)


def get_column(entity_type, key):
    """Get the mapped column for one of the config keys (id, label, bundle, status)."""
    field_name = getattr(entity_type, f'{key}_field')
    return getattr(entity_type.model, field_name)
