"""
FitTrack.

- backend/: HTTP API, database models, services, configuration
- cli/: Command-line client (Typer + Rich)
"""
