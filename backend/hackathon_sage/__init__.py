"""Hackathon Sage - feasibility estimator for hackathon project ideas."""

__version__ = "0.1.0"
