"""Domain services - Stateless operations on domain objects."""

from .expiry_alert_analyzer import ExpiryAlertAnalyzer
from .expiry_classifier import ExpiryClassifier
from .session_gate import SessionGate
from .trip_code_generator import TripCodeGenerator, random_suffix_source

__all__ = [
    "ExpiryAlertAnalyzer",
    "ExpiryClassifier",
    "SessionGate",
    "TripCodeGenerator",
    "random_suffix_source",
]
