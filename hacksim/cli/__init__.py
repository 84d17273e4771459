"""Command-line interface for HackSim."""
