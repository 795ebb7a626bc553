from sqlalchemy import Column, Integer, String, DateTime
from portfolio_app.database.connection import Base, utcnow


class ClickEvent(Base):
    """
    One recorded resolution of a generated link.
    
    link_id references GeneratedLink.link_id logically; no foreign key is
    declared, so the storage engine never rejects or cascades click rows.
    Rows are append-only.
    """
    __tablename__ = "analytics"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    link_id = Column(String(64), nullable=False, index=True)
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)
    referer = Column(String, nullable=True)  # NULL = direct traffic
    clicked_at = Column(DateTime, default=utcnow, nullable=False, index=True)
