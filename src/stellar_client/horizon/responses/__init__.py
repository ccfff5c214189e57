"""Typed models for Horizon JSON responses."""
