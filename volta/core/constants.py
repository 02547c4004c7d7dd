"""
Engine Constants

Fixed values shared across the designer engine. Tunable limits live in
volta.config.Settings; these are the defaults and well-known names.
"""

# Undo depth when no Settings override is given
MAX_HISTORY = 50

# Zoom bounds (percent)
ZOOM_MIN = 25
ZOOM_MAX = 200
DEFAULT_ZOOM = 100

# Description of the history entry created when a session opens
INITIAL_ACTION_DESCRIPTION = "Initial layout"
