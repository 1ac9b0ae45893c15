"""Configuration settings and constants for the seasonize package."""

# Metadata records written next to each download
INFO_JSON_SUFFIX: str = ".info.json"

# Discriminator values of the metadata record
INFO_TYPE_KEY: str = "_type"
INFO_TYPE_VIDEO: str = "video"
INFO_TYPE_PLAYLIST: str = "playlist"

# Videos sourced from this listing are excluded from the catalogue
SHORTS_URL_SUFFIX: str = "/shorts"

# Compact calendar date used when no epoch timestamp is available
UPLOAD_DATE_FORMAT: str = "%Y%m%d"
UPLOAD_DATE_LENGTH: int = 8

# Output tree naming
SEASON_FOLDER_TEMPLATE: str = "Season {number}"
TITLE_PATH_SEPARATOR: str = "/"
TITLE_SEPARATOR_REPLACEMENT: str = "_"

# Shortest full title accepted before falling back to the plain title
MIN_FULL_TITLE_LENGTH: int = 2

# Log file written next to the working directory
LOG_FILE: str = "seasonize.log"
LOG_ROTATION: str = "10 MB"
LOG_RETENTION: str = "7 days"
