"""Candidate directory - the sibling entities whose names can be linked from an entity's text.

For a subject entity this returns every other published entity of the same
type and bundle as an ordered {id: name} mapping. The per-bundle list may be
cached; the subject is always removed after the cache read, and the links
computed from the list are never cached.
"""
from flask import current_app
from loguru import logger
from sqlalchemy import event, inspect

from ..entity_types import get_entity_type, get_entity_types, get_column
from ..extensions import db, cache


def get_candidates(entity):
    """Get all related entities of a subject entity.

    Args:
        entity: Content entity (Term, Node, ...)

    Returns:
        Dict of id -> name ordered by name, excluding the entity itself
    """
    entity_type = get_entity_type(entity.entity_type_id)
    results = get_bundle_candidates(entity_type, entity.bundle)

    # The subject never links to itself
    subject_id = entity.id
    return {identifier: name for identifier, name in results if identifier != subject_id}


def get_bundle_candidates(entity_type, bundle):
    """Get (id, name) pairs of all published entities in one bundle, ordered by name.

    Cached under a per-bundle key for CANDIDATE_CACHE_TIMEOUT seconds.
    """
    cache_key = candidate_cache_key(entity_type, bundle)

    results = cache.get(cache_key)
    if results is not None:
        return results

    id_column = get_column(entity_type, 'id')
    label_column = get_column(entity_type, 'label')

    rows = (
        db.session.query(id_column, label_column)
        .filter(
            get_column(entity_type, 'bundle') == bundle,
            get_column(entity_type, 'status') == True,
        )
        .order_by(label_column, id_column)
        .all()
    )
    results = [(row[0], row[1]) for row in rows]

    logger.debug(f"Loaded {len(results)} candidates for {entity_type.entity_type_id}:{bundle}")
    cache.set(cache_key, results, timeout=current_app.config['CANDIDATE_CACHE_TIMEOUT'])

    return results


def candidate_cache_key(entity_type, bundle):
    return entity_type.model.get_cache_key(candidates=bundle)


def invalidate_candidates(entity_type, bundle):
    """Drop the cached candidate list of a bundle."""
    cache.delete(candidate_cache_key(entity_type, bundle))


def _invalidate_for_target(mapper, connection, target):
    entity_type = get_entity_type(target.entity_type_id)
    invalidate_candidates(entity_type, target.bundle)

    # A bundle change also changes the list the entity left
    history = inspect(target).attrs[entity_type.bundle_field].history
    for previous_bundle in history.deleted or ():
        invalidate_candidates(entity_type, previous_bundle)


def register_invalidation_listeners():
    """Invalidate cached candidate lists whenever a registered entity is written."""
    from .. import models  # registers entity types

    for entity_type in get_entity_types().values():
        for event_name in ('after_insert', 'after_update', 'after_delete'):
            if not event.contains(entity_type.model, event_name, _invalidate_for_target):
                event.listen(entity_type.model, event_name, _invalidate_for_target)
