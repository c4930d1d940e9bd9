"""importsweep: alias, sort and prune JavaScript/TypeScript import statements."""

__version__ = "0.1.0"
