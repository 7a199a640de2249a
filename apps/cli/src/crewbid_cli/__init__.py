"""Crewbid command-line host."""
