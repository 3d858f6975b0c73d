"""add game reference to users

Users now point at their game directly instead of going through players.

Revision ID: 2c8e4a7f1b96
Revises: e61a0c9b3d57
Create Date: 2025-09-16 09:05:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '2c8e4a7f1b96'
down_revision = 'e61a0c9b3d57'
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table('users') as batch_op:
        batch_op.add_column(sa.Column('game_id', sa.Integer(), nullable=True))
        batch_op.create_foreign_key('fk_users_game_id', 'games', ['game_id'], ['id'])


def downgrade():
    with op.batch_alter_table('users') as batch_op:
        batch_op.drop_constraint('fk_users_game_id', type_='foreignkey')
        batch_op.drop_column('game_id')
