"""Crewbid core - shared pairing and preference data shapes."""
