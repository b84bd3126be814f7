"""
Group Control Configuration

Settings for the dispatch controller. Contains only control logic settings,
not physical specifications.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional


def _section(data: Optional[dict], key: str) -> dict:
    """Sub-mapping at key; a missing or empty (null) section reads as {}"""
    value = (data or {}).get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' section must be a mapping")
    return value


@dataclass
class AllocationStrategyConfig:
    """Configuration for call allocation strategy"""
    name: str = "NearestRequest"
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise ValueError("allocation_strategy.name cannot be empty")
        if not isinstance(self.parameters, dict):
            raise ValueError("allocation_strategy.parameters must be a mapping")


@dataclass
class GroupControlConfig:
    """
    Group Control configuration

    Attributes:
        allocation_strategy: Policy used when an elevator goes idle
        update_indicators: Set going up/down indicators when dispatching
    """
    allocation_strategy: Optional[AllocationStrategyConfig] = None
    update_indicators: bool = False

    def __post_init__(self):
        if self.allocation_strategy is None:
            self.allocation_strategy = AllocationStrategyConfig()

    @classmethod
    def from_dict(cls, data: dict) -> 'GroupControlConfig':
        """Create GroupControlConfig from dictionary"""
        gc_data = _section(data, 'group_control') if 'group_control' in (data or {}) else (data or {})

        alloc_data = _section(gc_data, 'allocation_strategy')
        allocation_strategy = AllocationStrategyConfig(
            name=alloc_data.get('name', 'NearestRequest'),
            parameters=alloc_data.get('parameters') or {}
        )

        return cls(
            allocation_strategy=allocation_strategy,
            update_indicators=bool(gc_data.get('update_indicators', False))
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'group_control': {
                'allocation_strategy': {
                    'name': self.allocation_strategy.name,
                    'parameters': self.allocation_strategy.parameters
                },
                'update_indicators': self.update_indicators
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        if not self.allocation_strategy.name:
            raise ValueError("allocation_strategy.name is required")

        tie_break = self.allocation_strategy.parameters.get('tie_break')
        if tie_break is not None and tie_break not in ('lower', 'upper'):
            raise ValueError(f"allocation_strategy.parameters.tie_break must be 'lower' or 'upper', got '{tie_break}'")
