from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "2025_06_02_create_housing_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String, primary_key=True),
        sa.Column("email", sa.String, unique=True),
        sa.Column("first_name", sa.String),
        sa.Column("last_name", sa.String),
        sa.Column("profile_image_url", sa.String),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("price", sa.Integer, nullable=False),
        sa.Column("property_type", sa.String(32), nullable=False),
        sa.Column("bedrooms", sa.Integer),
        sa.Column("bathrooms", sa.Numeric(3, 1)),
        sa.Column("square_footage", sa.Integer),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("city", sa.Text, nullable=False),
        sa.Column("state", sa.Text, nullable=False),
        sa.Column("zip_code", sa.Text, nullable=False),
        sa.Column("latitude", sa.Numeric(10, 8)),
        sa.Column("longitude", sa.Numeric(11, 8)),
        sa.Column("distance_to_campus", sa.Numeric(3, 1)),
        sa.Column("university", sa.Text, nullable=False),
        sa.Column("image_urls", postgresql.ARRAY(sa.Text), server_default="{}"),
        sa.Column("amenities", postgresql.ARRAY(sa.Text), server_default="{}"),
        sa.Column("utilities", postgresql.ARRAY(sa.Text), server_default="{}"),
        sa.Column("rating", sa.Numeric(2, 1)),
        sa.Column("review_count", sa.Integer, server_default="0"),
        sa.Column("available", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("available_date", sa.DateTime(timezone=True)),
        sa.Column("contact_email", sa.Text),
        sa.Column("contact_phone", sa.Text),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price >= 0", name="ck_properties_price_non_negative"),
    )
    op.create_index("idx_properties_available_price", "properties", ["available", "price"])
    op.create_index("idx_properties_university", "properties", ["university"])
    op.create_index("idx_properties_amenities", "properties", ["amenities"], postgresql_using="gin")

    op.create_table(
        "saved_properties",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.String, nullable=False),
        sa.Column("property_id", sa.Integer, sa.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "property_id", name="uq_saved_properties_user_property"),
    )
    op.create_index("ix_saved_properties_user_id", "saved_properties", ["user_id"])

    op.create_table(
        "search_history",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.String, nullable=False),
        sa.Column("search_query", sa.Text),
        sa.Column("filters", postgresql.JSONB),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_search_history_user_id", "search_history", ["user_id"])

def downgrade():
    op.drop_index("ix_search_history_user_id", "search_history")
    op.drop_table("search_history")
    op.drop_index("ix_saved_properties_user_id", "saved_properties")
    op.drop_table("saved_properties")
    op.drop_index("idx_properties_amenities", "properties")
    op.drop_index("idx_properties_university", "properties")
    op.drop_index("idx_properties_available_price", "properties")
    op.drop_table("properties")
    op.drop_table("users")
