from typing import Optional

from sqlalchemy.orm import Session
from portfolio_app.exceptions import require_fields
from portfolio_app.models.click import ClickEvent


class ClickRecorder:
    """
    Appends click events to the analytics table.
    
    The recorder never commits: the event joins the caller's unit of work so
    LinkService can commit it together with the click_count increment.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def record(
        self,
        link_id: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        referer: Optional[str] = None,
    ) -> None:
        """
        Stage one ClickEvent row.
        
        Visitor fields are stored as opaque strings; a None referer means
        direct traffic.
        
        Raises:
            ValidationError: link_id is empty
        """
        require_fields(link_id=link_id)
        self.db.add(ClickEvent(
            link_id=link_id,
            ip_address=ip_address,
            user_agent=user_agent,
            referer=referer,
        ))
