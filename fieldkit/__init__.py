"""Embedded-firmware helpers: NTP time, strict strings, versions, spinboxes and AT parsing."""

__version__ = "0.1.0"