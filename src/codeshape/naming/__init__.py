"""Naming convention profiling."""

from .conventions import NamingCategory, NamingConvention, NamingStat, classify, profile

__all__ = ["NamingCategory", "NamingConvention", "NamingStat", "classify", "profile"]
