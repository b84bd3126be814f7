"""Interface definitions for dispatch policies"""

from .allocation_strategy import IAllocationStrategy

__all__ = [
    'IAllocationStrategy',
]
