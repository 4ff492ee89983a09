"""Canonical URLs of content entities."""
from flask import url_for
from werkzeug.routing import BuildError

from ..entity_types import get_entity_type
from ..exceptions import LinkBuildError


def canonical_url(entity_type_id, identifier):
    """Build the canonical URL of an entity.

    Raises:
        LinkBuildError: If the entity type has no canonical route
    """
    entity_type = get_entity_type(entity_type_id)
    try:
        return url_for(entity_type.canonical_endpoint, **{entity_type.route_param: identifier})
    except BuildError as e:
        raise LinkBuildError(entity_type_id, identifier, reason=str(e)) from e


def canonical_url_builder(entity_type_id):
    """URL builder for one entity type, as expected by link_entities()."""
    def build(identifier):
        return canonical_url(entity_type_id, identifier)
    return build
