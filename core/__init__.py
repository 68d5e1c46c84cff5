"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- The single-read session slot
- Observability middleware, metrics and tracing
- Health check views
"""
