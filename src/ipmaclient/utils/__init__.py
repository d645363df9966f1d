"""Utility helpers for the IPMA client."""
