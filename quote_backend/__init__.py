"""
Backend package for the motivational quote API.

This package provides a FastAPI application that serves random quotes from
a Supabase table, falling back to a static list when the table is
unreachable or not configured.
"""
