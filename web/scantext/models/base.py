"""Base model classes and mixins for all database models."""
from collections import namedtuple
from datetime import datetime, timezone
from ..extensions import db
from ..entity_types import get_entity_type

FieldDefinition = namedtuple('FieldDefinition', ['entity_type_id', 'field_name', 'field_type'])


class TimestampMixin:
    """Mixin for models that need created_at/updated_at timestamps."""
    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class ContentEntityMixin:
    """Mixin for content entities that have a bundle, a label and a published flag.

    Subclasses set ``entity_type_id`` and register an EntityTypeConfig under it;
    the generic accessors below read the configured columns so collaborators
    (candidate directory, URL builder, formatters) never hardcode column names.
    """
    entity_type_id = None

    # field name -> field type, for fields rendered through text formatters
    text_fields = {}

    @property
    def entity_type(self):
        return get_entity_type(self.entity_type_id)

    @property
    def id(self):
        return getattr(self, self.entity_type.id_field)

    @property
    def bundle(self):
        return getattr(self, self.entity_type.bundle_field)

    @property
    def label(self):
        return getattr(self, self.entity_type.label_field)

    @property
    def is_published(self):
        return bool(getattr(self, self.entity_type.status_field))

    @classmethod
    def get_field_definition(cls, field_name):
        """Get the FieldDefinition of a text field, or None for anything else."""
        field_type = cls.text_fields.get(field_name)
        if field_type is None:
            return None
        return FieldDefinition(cls.entity_type_id, field_name, field_type)

    @classmethod
    def get_cache_key(cls, **kwargs):
        """Generate cache key from entity type and kwargs."""
        key_parts = [cls.entity_type_id or cls.__name__]
        for k, v in sorted(kwargs.items()):
            key_parts.append(f"{k}:{v}")
        return ":".join(key_parts)


class BaseModel(db.Model):
    """Abstract base for all models; no table of its own."""
    __abstract__ = True
