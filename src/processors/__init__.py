"""
Period processors
"""

from .period_processor import PeriodProcessor

__all__ = ['PeriodProcessor']
