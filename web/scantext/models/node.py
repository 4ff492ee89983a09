"""Content node models"""
from ..extensions import db
from ..entity_types import EntityTypeConfig, register_entity_type
from ..models.base import BaseModel, TimestampMixin, ContentEntityMixin


# Junction table linking nodes to taxonomy terms
node_tags = db.Table(
    'node_tags',
    db.Column('nid', db.Integer, db.ForeignKey('node_field_data.nid'), primary_key=True),
    db.Column('tid', db.Integer, db.ForeignKey('taxonomy_term_field_data.tid'), primary_key=True),
)


class Node(BaseModel, TimestampMixin, ContentEntityMixin):
    """Content node (page, article, ...).

    ``type`` is the bundle. Nodes reference taxonomy terms through ``tags``,
    edited with the term reference widget.
    """
    __tablename__ = 'node_field_data'

    entity_type_id = 'node'
    text_fields = {'body': 'text_with_summary'}

    # Primary Key
    nid = db.Column(db.Integer, primary_key=True)

    # Bundle
    type = db.Column(db.String(32), nullable=False, index=True)

    # Basic Info
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text)
    body_format = db.Column(db.String(32))
    langcode = db.Column(db.String(12), default='en')

    # Published flag
    status = db.Column(db.Boolean, nullable=False, default=False)

    # ===== RELATIONSHIPS =====

    # Many-to-Many: Node -> Terms
    tags = db.relationship(
        'Term',
        secondary=node_tags,
        order_by='Term.name',
        lazy='selectin'
    )

    def __repr__(self):
        return f"<Node({self.nid}: {self.title[:50]})>"


register_entity_type(EntityTypeConfig(
    entity_type_id='node',
    model=Node,
    id_field='nid',
    label_field='title',
    bundle_field='type',
    status_field='status',
    canonical_endpoint='nodes.node_detail',
    route_param='node_id',
))
