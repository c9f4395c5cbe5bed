"""Constants for epify."""

# Show directories look like "Series Name (2018) [tvdbid-65567]"
YEAR_SEP = " ("
SHOW_DIR_FORMAT = "{name} ({year}) [tvdbid-{id}]"

# Movies look like "Film (2018) [tmdbid-65567].mkv"
MOVIE_FORMAT = "{name} ({year}) [tmdbid-{id}]{ext}"

# Season directories look like "Season 01"
SEASON_PREFIX = "Season "
SEASON_DIR_FORMAT = SEASON_PREFIX + "{number:02d}"

# Episodes look like "Series Name S01E01.mkv" (or "S01E01.mkv" when bare)
EPISODE_FORMAT = "{show} S{season:02d}E{episode:02d}{ext}"
BARE_EPISODE_FORMAT = "S{season:02d}E{episode:02d}{ext}"

# Marker preceding the episode number in an existing episode filename
EPISODE_MARKER = "E"

# Filesystem
DIR_MODE = 0o755

# Ordering
DEFAULT_MATCH_INDEX = 0

# Upper bound on concurrent moves for one batch
MAX_RENAME_WORKERS = 16

# Environment variables
MATCH_INDEX_ENV = "EPIFY_MATCH_INDEX"
TORRENT_DIR_ENV = "TR_TORRENT_DIR"
TORRENT_NAME_ENV = "TR_TORRENT_NAME"
