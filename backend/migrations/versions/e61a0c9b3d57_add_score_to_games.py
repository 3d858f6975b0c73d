"""add score to games

Revision ID: e61a0c9b3d57
Revises: a95c61d04f3b
Create Date: 2025-09-09 18:40:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'e61a0c9b3d57'
down_revision = 'a95c61d04f3b'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = {c['name'] for c in insp.get_columns('games')}
    if 'score' not in cols:
        with op.batch_alter_table('games') as batch_op:
            batch_op.add_column(sa.Column('score', sa.Integer(), server_default='0', nullable=False))


def downgrade():
    with op.batch_alter_table('games') as batch_op:
        batch_op.drop_column('score')
