"""Candidate registration, voter roll, polling tables and vote counting for a district election."""

__version__ = "0.1.0"