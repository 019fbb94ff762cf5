"""
Domain module initialization.
"""
from .identity import parse_identity, parse_intensity
from .repositories import RecordStore, PredictionMatcher, Identity
