"""
Date Range Filter
"""
