"""
Infrastructure layer - database, logging, settings, and technical concerns.

This layer contains infrastructure concerns like the rundown persistence
backends, logging configuration and settings management.
"""
