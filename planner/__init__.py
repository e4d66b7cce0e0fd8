"""Command-line planner built on the swim_pacing core."""
