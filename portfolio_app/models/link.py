from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text
from portfolio_app.database.connection import Base, utcnow


class GeneratedLink(Base):
    """
    A project link handed out by the link registry.
    
    click_count is a denormalized counter. It is only ever incremented in the
    same transaction that inserts the matching ClickEvent row, so it stays equal
    to the number of analytics rows for this link_id.
    """
    __tablename__ = "generated_links"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Note: unique=True automatically creates an index
    link_id = Column(String(64), unique=True, nullable=False, index=True)
    project_name = Column(String, nullable=False)
    project_type = Column(String, nullable=False)
    original_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=True)  # NULL means the link never expires
    is_active = Column(Boolean, default=True, nullable=False)
    click_count = Column(Integer, default=0, nullable=False)
