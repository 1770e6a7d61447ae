"""CLI commands for assetsweep."""
