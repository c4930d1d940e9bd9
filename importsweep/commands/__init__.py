"""Command handlers wired up by importsweep.cli."""
