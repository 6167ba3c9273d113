"""Challenges: participation, progress and leaderboards."""
