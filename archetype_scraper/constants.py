import re

# Sentinels used when the source page is missing data.
NO_TITLE = "No title"
NO_DESCRIPTION = "No description"
NO_IMAGE_TITLE = "No image title"

HEADING_TAG = "h3"
CAPTION_SELECTOR = "#archetypes p.title"
CAPTION_CLASSES = ("title", "subtitle")

SAFE_LABEL_RE = re.compile(r"[^A-Za-z0-9_-]")
SET_CODE_RE = re.compile(r"[A-Za-z0-9_-]+")

GROUP_SIZE = 5
