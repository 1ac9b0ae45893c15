"""
Seasonize - Channel archive to series library tool.

Turns a flat archive of downloaded channel videos into a browsable series:
- Scanning ``.info.json`` metadata records and their sidecar files
- Grouping videos by channel
- Splitting each channel into yearly seasons of date-ordered episodes
- Creating a symlink tree that media-library software reads as a show
"""

__version__ = "0.1.0"
