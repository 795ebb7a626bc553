"""
Factory for creating link identifier strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from portfolio_app.services.link_id_strategies import (
    LinkIdStrategy,
    UUIDLinkIdStrategy,
    RandomTokenLinkIdStrategy
)
from portfolio_app.config import settings


class LinkIdStrategyType(Enum):
    """Available link identifier strategies"""
    UUID4 = "uuid4"
    RANDOM = "random"


class LinkIdFactory:
    """Factory for creating link identifier strategies with caching"""
    
    _instances = {}  # Cache for strategy instances
    
    @classmethod
    def create_strategy(
        cls,
        strategy_type: LinkIdStrategyType = None
    ) -> LinkIdStrategy:
        """
        Create or return cached link identifier strategy.
        
        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
        
        Returns:
            A cached instance of a LinkIdStrategy
        
        Raises:
            ValueError: If strategy_type is unknown
        """
        if strategy_type is None:
            strategy_type = LinkIdStrategyType(settings.link_id_strategy)
        
        if strategy_type in cls._instances:
            return cls._instances[strategy_type]
        
        if strategy_type == LinkIdStrategyType.UUID4:
            instance = UUIDLinkIdStrategy()
        elif strategy_type == LinkIdStrategyType.RANDOM:
            instance = RandomTokenLinkIdStrategy(
                length=settings.link_id_length,
                max_retries=settings.max_retries
            )
        else:
            raise ValueError(f"Unknown link identifier strategy: {strategy_type}")
        
        cls._instances[strategy_type] = instance
        return instance
    
    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}
