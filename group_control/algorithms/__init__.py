"""Allocation strategy implementations"""

from .nearest_request import NearestRequestStrategy

__all__ = [
    'NearestRequestStrategy',
]
