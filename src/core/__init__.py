"""
Core numeric primitives and domain models.

This module contains the foundational float utilities that are independent
of any display toolkit: they only classify and re-render double values.
"""
