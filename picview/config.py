"""Application configuration constants."""

from __future__ import annotations

# Window
WINDOW_TITLE = "PicView"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800
WINDOW_MIN_WIDTH = 320
WINDOW_MIN_HEIGHT = 240
TARGET_FPS = 60

# Zoom limits
ZOOM_MIN = 0.01
ZOOM_MAX = 50.0
ZOOM_EPSILON = 0.001   # Smaller changes are ignored
FIT_MAX_SCALE = 1.0    # Never upscale when fitting

# Zoom steps (multiplicative)
ZOOM_STEP_KEYS = 1.25
ZOOM_STEP_WHEEL = 1.15

# Image limits
MAX_IMAGE_DIMENSION = 16384

# Status bar
STATUS_BAR_HEIGHT = 28
STATUS_FONT_SIZE = 16
STATUS_PADDING = 10

# Messages (errors, confirmations)
MESSAGE_DURATION_S = 4.0
MESSAGE_FONT_SIZE = 20

# Rename prompt
PROMPT_WIDTH = 480
PROMPT_HEIGHT = 120
PROMPT_FONT_SIZE = 20
PROMPT_MAX_LENGTH = 200

# Colors (r, g, b)
BG_COLOR = (30, 30, 30)
STATUS_BG_COLOR = (18, 18, 18)
TEXT_COLOR = (220, 220, 220)
DIM_TEXT_COLOR = (140, 140, 140)
ERROR_COLOR = (230, 80, 80)

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 32     # KEY_SPACE
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 259    # KEY_BACKSPACE
KEY_FIRST_IMAGE = 268       # KEY_HOME
KEY_LAST_IMAGE = 269        # KEY_END
KEY_ZOOM_IN = 61            # KEY_EQUAL (shares the '+' key)
KEY_ZOOM_IN_ALT = 334       # KEY_KP_ADD
KEY_ZOOM_OUT = 45           # KEY_MINUS
KEY_ZOOM_OUT_ALT = 333      # KEY_KP_SUBTRACT
KEY_ACTUAL_SIZE = 49        # KEY_ONE
KEY_ACTUAL_SIZE_ALT = 321   # KEY_KP_1
KEY_FIT = 70                # KEY_F
KEY_FIT_ALT = 256           # KEY_ESCAPE
KEY_OPEN = 79               # KEY_O
KEY_DELETE_IMAGE = 261      # KEY_DELETE
KEY_RENAME = 291            # KEY_F2
KEY_MAXIMIZE = 300          # KEY_F11
KEY_ENTER = 257             # KEY_ENTER
KEY_KP_ENTER = 335          # KEY_KP_ENTER
KEY_ESCAPE = 256            # KEY_ESCAPE
KEY_BACKSPACE = 259         # KEY_BACKSPACE

# Characters rejected in file names (Windows set, applied everywhere)
FORBIDDEN_NAME_CHARS = frozenset('<>:"/\\|?*' + "".join(chr(c) for c in range(32)))

# Supported image extensions
IMG_EXTS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tiff", ".tif", ".ico",
})

# Open dialog filter (tkinter filetypes)
OPEN_DIALOG_TITLE = "Open Image"
OPEN_DIALOG_FILETYPES = (
    ("Image files", " ".join(f"*{ext}" for ext in sorted(IMG_EXTS))),
    ("All files", "*.*"),
)
