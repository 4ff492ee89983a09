"""Export all models for easy importing"""

# Base models and mixins
from .base import BaseModel, TimestampMixin, ContentEntityMixin, FieldDefinition

# Taxonomy models
from .taxonomy import Vocabulary, Term

# Content models
from .node import Node, node_tags

__all__ = [
    # Base
    'BaseModel',
    'TimestampMixin',
    'ContentEntityMixin',
    'FieldDefinition',

    # Taxonomy
    'Vocabulary',
    'Term',

    # Content
    'Node',
    'node_tags',
]
