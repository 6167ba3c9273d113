"""Users and their running emission stats."""
