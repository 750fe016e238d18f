"""
fibtree decomposition tree converters

This package contains converters to transform decomposition trees into various formats.
"""

from .json_converter import to_json
from .dot_converter import to_dot

__all__ = ['to_json', 'to_dot']
