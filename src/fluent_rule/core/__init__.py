"""
Core builders and models.
"""
