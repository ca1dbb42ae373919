"""Typed models for the Azure Machine Learning management REST API."""

__version__ = "0.1.0"
