"""Declarative form validation, submission lifecycle and text segmentation."""

__version__ = "0.1.0"
