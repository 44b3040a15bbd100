"""PageScan — fetch pages and pull out their headings and links."""

__version__ = "0.1.0"
