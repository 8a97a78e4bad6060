"""
CLI Client Module.

Command-line client built with Typer for managing family members,
equipment, workouts and exercise logs through the backend API.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend
- CLI calls backend via HTTP (httpx)
- Sends X-Frontend-ID: cli header for log routing

Usage:
    python cli.py --help
    python cli.py members list
    python cli.py workouts add 1 "Leg day" --date 2024-03-18
"""
