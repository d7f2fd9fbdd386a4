"""
Core counter bank implementation, models and validation.
"""
