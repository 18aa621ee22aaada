"""
Module containing package-wide utilities.
"""
from .resources import RESOURCES, Resources, jit

__all__ = ['RESOURCES', 'Resources', 'jit']
