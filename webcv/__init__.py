"""
webcv - Static resume websites from a single YAML file

Turns a structured resume document into a static website, and keeps the scaffold
files it generated in a user's project up to date without clobbering local edits.

Architecture:
- Scaffolding Context: Managed scaffold files, sync state and safe upgrades
- Rendering Context: Resume loading, theme rendering and asset output
"""

__version__ = "0.1.0"
