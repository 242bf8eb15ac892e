"""Momento export parsing module."""

from .parser import parse, parse_file
from .classifier import classify_line
from .schemas import Moment, LineKind, ClassifiedLine

__all__ = [
    "parse",
    "parse_file",
    "classify_line",
    "Moment",
    "LineKind",
    "ClassifiedLine"
]
