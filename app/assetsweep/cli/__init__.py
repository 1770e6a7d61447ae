"""CLI module for assetsweep."""
