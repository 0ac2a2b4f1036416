from __future__ import annotations

# Single source of truth for static constants and defaults.

# Art Institute of Chicago public artworks endpoint.
DEFAULT_SOURCE_URL = "https://api.artic.edu/api/v1/artworks"

# Display fields requested for every artwork row.
DEFAULT_FIELDS = (
  "id",
  "title",
  "place_of_origin",
  "artist_display",
  "inscriptions",
  "date_start",
  "date_end",
)

DEFAULT_KEY_FIELD = "id"

DEFAULT_PAGE_SIZE = 10

# The artworks API refuses page * limit beyond 10 000 records.
DEFAULT_PAGE_CEILING = 1000

DEFAULT_REQUEST_TIMEOUT = 10.0
