"""create users, posts, members, projects and meetings

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('ADMIN', 'USER', name='userrole')
user_status = sa.Enum('ACTIVE', 'INACTIVE', 'BANNED', name='userstatus')
post_status = sa.Enum('DRAFT', 'PUBLISHED', 'ARCHIVED', name='poststatus')
gender = sa.Enum('MALE', 'FEMALE', 'OTHER', name='gender')
member_role = sa.Enum('ADVISOR', 'LEADER', 'CORE_MEMBER', 'MEMBER', 'ALUMNI', name='memberrole')
member_status = sa.Enum('ACTIVE', 'INACTIVE', 'GRADUATED', name='memberstatus')
project_status = sa.Enum('PLANNING', 'ONGOING', 'COMPLETED', 'SUSPENDED', 'CANCELLED', name='projectstatus')
project_category = sa.Enum('RESEARCH', 'DEVELOPMENT', 'COMPETITION', 'COLLABORATION', 'OTHER', name='projectcategory')
meeting_type = sa.Enum('REGULAR', 'EMERGENCY', 'PLANNING', 'REVIEW', 'TRAINING', name='meetingtype')
meeting_status = sa.Enum('SCHEDULED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED', name='meetingstatus')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=True),
        sa.Column('avatar_url', sa.String(length=200), nullable=True),
        sa.Column('role', user_role, nullable=False),
        sa.Column('status', user_status, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('summary', sa.String(length=500), nullable=True),
        sa.Column('cover_image', sa.String(length=200), nullable=True),
        sa.Column('status', post_status, nullable=False),
        sa.Column('allow_comments', sa.Boolean(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=True),
        sa.Column('tags', sa.String(length=500), nullable=True),
        sa.Column('author_id', sa.Integer(), nullable=True),
        sa.Column('view_count', sa.Integer(), nullable=False),
        sa.Column('like_count', sa.Integer(), nullable=False),
        sa.Column('comment_count', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('published_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_posts_id'), 'posts', ['id'], unique=False)
    op.create_index(op.f('ix_posts_status'), 'posts', ['status'], unique=False)
    op.create_index(op.f('ix_posts_author_id'), 'posts', ['author_id'], unique=False)

    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('gender', gender, nullable=True),
        sa.Column('grade', sa.String(length=10), nullable=True),
        sa.Column('major', sa.String(length=100), nullable=True),
        sa.Column('role', member_role, nullable=True),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('research_direction', sa.String(length=200), nullable=True),
        sa.Column('bio', sa.String(length=500), nullable=True),
        sa.Column('avatar_url', sa.String(length=200), nullable=True),
        sa.Column('status', member_status, nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('github_url', sa.String(length=200), nullable=True),
        sa.Column('linkedin_url', sa.String(length=200), nullable=True),
        sa.Column('personal_website', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_members_id'), 'members', ['id'], unique=False)
    op.create_index(op.f('ix_members_student_id'), 'members', ['student_id'], unique=True)
    op.create_index(op.f('ix_members_status'), 'members', ['status'], unique=False)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', project_status, nullable=True),
        sa.Column('category', project_category, nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=True),
        sa.Column('goals', sa.String(length=500), nullable=True),
        sa.Column('tech_stack', sa.String(length=1000), nullable=True),
        sa.Column('achievements', sa.String(length=500), nullable=True),
        sa.Column('budget', sa.Float(), nullable=True),
        sa.Column('progress', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.String(length=200), nullable=True),
        sa.Column('github_url', sa.String(length=200), nullable=True),
        sa.Column('project_url', sa.String(length=200), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_projects_id'), 'projects', ['id'], unique=False)
    op.create_index(op.f('ix_projects_status'), 'projects', ['status'], unique=False)
    op.create_index(op.f('ix_projects_category'), 'projects', ['category'], unique=False)

    op.create_table(
        'meetings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('meeting_date', sa.DateTime(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('type', meeting_type, nullable=True),
        sa.Column('status', meeting_status, nullable=False),
        sa.Column('attendees', sa.Text(), nullable=True),
        sa.Column('absentees', sa.Text(), nullable=True),
        sa.Column('minutes', sa.Text(), nullable=True),
        sa.Column('conclusion', sa.Text(), nullable=True),
        sa.Column('action_items', sa.Text(), nullable=True),
        sa.Column('tags', sa.String(length=500), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_meetings_id'), 'meetings', ['id'], unique=False)
    op.create_index(op.f('ix_meetings_meeting_date'), 'meetings', ['meeting_date'], unique=False)
    op.create_index(op.f('ix_meetings_type'), 'meetings', ['type'], unique=False)
    op.create_index(op.f('ix_meetings_status'), 'meetings', ['status'], unique=False)


def downgrade() -> None:
    op.drop_table('meetings')
    op.drop_table('projects')
    op.drop_table('members')
    op.drop_table('posts')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (meeting_status, meeting_type, project_category, project_status,
                      member_status, member_role, gender, post_status, user_status, user_role):
        enum_type.drop(bind, checkfirst=True)
