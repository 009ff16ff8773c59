# layout/__init__.py
"""
Micromódulo del layout de bloques SPED.
"""

from .loader import LayoutLoader
from .models import BlockDefinition, LayoutSchema

__all__ = [
    'LayoutLoader',
    'LayoutSchema',
    'BlockDefinition'
]
