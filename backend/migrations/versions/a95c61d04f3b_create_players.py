"""create players

The players join table is no longer mapped by the ORM; users reference their
game directly since 2c8e4a7f1b96. It is kept so existing databases upgrade
cleanly.

Revision ID: a95c61d04f3b
Revises: 7d3f05b8e2a4
Create Date: 2025-09-02 10:16:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a95c61d04f3b'
down_revision = '7d3f05b8e2a4'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('game_id', sa.Integer(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('points', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['game_id'], ['games.id'], name='fk_players_game_id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_players_user_id'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_players_game_id', 'players', ['game_id'])
    op.create_index('ix_players_user_id', 'players', ['user_id'])


def downgrade():
    op.drop_index('ix_players_user_id', table_name='players')
    op.drop_index('ix_players_game_id', table_name='players')
    op.drop_table('players')
