"""Module: picdesk.config.paths

Date: 2026-10-17

File system configuration: accepted image extensions, thumbnails, logs.
"""

# =====================================
# IMAGE FILE EXTENSIONS
# =====================================

IMAGE_EXTENSIONS = {
    # Common raster formats
    "jpg", "jpeg", "png", "tiff", "tif", "bmp", "gif", "webp", "heic", "heif",
    # Vector
    "svg",
    # RAW image formats
    "nef", "raw", "rw2", "arw", "cr2", "cr3", "dng", "orf",
}

# =====================================
# THUMBNAILS
# =====================================

THUMBNAIL_MAX_SIZE = 256  # pixels, longest edge

# =====================================
# LOGS
# =====================================

LOG_DIR = "logs"
