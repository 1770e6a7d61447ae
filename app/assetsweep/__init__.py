"""assetsweep - find and remove unused images and Blade components."""

__version__ = "0.1.0"
