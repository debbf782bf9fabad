"""
Core Report Registry

Maps document types to the context builders of their templates.
"""

from .registry import ReportRegistry, get_builder, is_registered, list_reports, register_report

__all__ = [
    'ReportRegistry',
    'get_builder',
    'is_registered',
    'list_reports',
    'register_report',
]
