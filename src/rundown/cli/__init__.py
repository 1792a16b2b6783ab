"""Operator command-line interface for Rundown."""
