"""
ROI Module - Payback of home improvements.

Features:
- Simple payback period from base vs improved annual cost
"""

from .calculator import PaybackResult, calculate_payback

__all__ = ['PaybackResult', 'calculate_payback']
