"""
Link identifier generation strategies.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
import uuid
from abc import ABC, abstractmethod
from sqlalchemy.orm import Session
from portfolio_app.models.link import GeneratedLink


class LinkIdStrategy(ABC):
    """Abstract base class for link identifier generation strategies"""
    
    @abstractmethod
    def generate(self, db_session: Session) -> str:
        """
        Generate a new link identifier.
        
        Args:
            db_session: Database session for strategies that need to check uniqueness
            
        Returns:
            An identifier not used by any existing GeneratedLink
        """
        pass


class UUIDLinkIdStrategy(LinkIdStrategy):
    """
    Random UUID4 identifiers (the default).
    
    Pros: No DB round trip, opaque, 122 random bits
    Cons: Long URLs
    
    Collisions are assumed negligible and are not checked; the unique index
    on generated_links.link_id would still reject a duplicate.
    """
    
    def generate(self, db_session: Session) -> str:
        return str(uuid.uuid4())


class RandomTokenLinkIdStrategy(LinkIdStrategy):
    """
    Short random token with collision checking.
    
    Pros: Shorter, nicer URLs
    Cons: One DB query per attempt, collision risk grows with volume
    """
    
    def __init__(self, length: int = 12, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries
        self.characters = string.ascii_letters + string.digits
    
    def generate(self, db_session: Session) -> str:
        """Generate random token, retrying while it is already taken"""
        for attempt in range(self.max_retries):
            link_id = self._generate_random_string()
            
            # Check if identifier already exists
            taken = db_session.query(GeneratedLink.id).filter(
                GeneratedLink.link_id == link_id
            ).first()
            if not taken:
                return link_id
        
        raise RuntimeError(
            f"Could not generate unique link identifier after {self.max_retries} attempts"
        )
    
    def _generate_random_string(self) -> str:
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
