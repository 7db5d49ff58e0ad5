"""PDF harvester: fetch a page, find its PDF links, download each one."""

__version__ = "1.0.0"
