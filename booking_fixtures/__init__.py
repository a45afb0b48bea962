"""Synthetic data factory for scheduling app integration and end-to-end tests."""
