"""Taxonomy models - vocabularies and the terms grouped in them."""
from ..extensions import db
from ..entity_types import EntityTypeConfig, register_entity_type
from ..models.base import BaseModel, TimestampMixin, ContentEntityMixin


class Vocabulary(BaseModel):
    """A named group of terms (the bundle of taxonomy_term).

    Maps to taxonomy_vocabulary table. ``vid`` is a machine name such as 'tags'.
    """
    __tablename__ = 'taxonomy_vocabulary'

    # Primary Key
    vid = db.Column(db.String(32), primary_key=True)

    # Basic Info
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    weight = db.Column(db.Integer, default=0)

    # ===== RELATIONSHIPS =====

    # One-to-Many: Vocabulary -> Terms
    terms = db.relationship(
        'Term',
        back_populates='vocabulary',
        order_by='Term.name',
        lazy='select'
    )

    def __repr__(self):
        return f"<Vocabulary({self.vid}: {self.name})>"


class Term(BaseModel, TimestampMixin, ContentEntityMixin):
    """Taxonomy term.

    Maps to taxonomy_term_field_data table. The description is free text
    rendered through a text format; mentions of sibling terms in it are
    hyperlinked by the scan_text formatter.
    """
    __tablename__ = 'taxonomy_term_field_data'

    entity_type_id = 'taxonomy_term'
    text_fields = {'description': 'text_long'}

    # Primary Key
    tid = db.Column(db.Integer, primary_key=True)

    # Bundle
    vid = db.Column(db.String(32), db.ForeignKey('taxonomy_vocabulary.vid'), nullable=False, index=True)

    # Basic Info
    name = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text)
    description_format = db.Column(db.String(32))
    langcode = db.Column(db.String(12), default='en')
    weight = db.Column(db.Integer, default=0)

    # Published flag
    status = db.Column(db.Boolean, nullable=False, default=True)

    # ===== RELATIONSHIPS =====

    # Many-to-One: Term -> Vocabulary
    vocabulary = db.relationship('Vocabulary', back_populates='terms')

    def __repr__(self):
        return f"<Term({self.tid}: {self.name})>"


register_entity_type(EntityTypeConfig(
    entity_type_id='taxonomy_term',
    model=Term,
    id_field='tid',
    label_field='name',
    bundle_field='vid',
    status_field='status',
    canonical_endpoint='taxonomy.term_detail',
    route_param='term_id',
))
