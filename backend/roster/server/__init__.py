"""Roster HTTP server: app factory, settings, middleware."""
