"""
API module - JSON endpoints for the activation list.
"""
