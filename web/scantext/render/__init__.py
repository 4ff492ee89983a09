"""Render elements and field formatters"""
from .elements import render_element, element_info
from .formatters import FieldFormatter, TextDefaultFormatter, ScanTextFormatter, get_formatter, get_applicable_formatters

__all__ = [
    'render_element',
    'element_info',
    'FieldFormatter',
    'TextDefaultFormatter',
    'ScanTextFormatter',
    'get_formatter',
    'get_applicable_formatters',
]
