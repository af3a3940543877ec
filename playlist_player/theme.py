"""UI theme constants — Tokyo Night–inspired dark theme."""

# Base palette
BG = '#1a1b26'
FG = '#c0caf5'
ACCENT = '#7aa2f7'
PLAY_GREEN = '#22c55e'
PLAY_GREEN_HOVER = '#4ade80'
STOP_RED = '#ef4444'
CARD = '#24283b'
ENTRY_BG = '#414868'
ENTRY_FG = '#c0caf5'
SUBTLE = '#565f89'
OK_GREEN = '#9ece6a'
ERROR_RED = '#f7768e'

# Typography
FONT_FAMILY = 'Segoe UI'
MONO_FAMILY = 'Consolas'
TITLE_FONT = (FONT_FAMILY, 12, 'bold')
HEADING_FONT = (FONT_FAMILY, 11, 'bold')
LABEL_FONT = (FONT_FAMILY, 9)
SMALL_FONT = (FONT_FAMILY, 8)
EDITOR_FONT = (MONO_FAMILY, 10)

# Spacing (use PAD for section gaps, SMALL_PAD for related elements)
PAD = 8
SMALL_PAD = 4
BTN_PAD = (4, 0)

# Layout
EDITOR_ROWS = 18
STATUS_WRAP = 360
# Element view refresh while something is on screen
VIEW_REFRESH_MS = 250

ICON_PLAY = '▶'
ICON_PAUSE = '⏸'
ICON_PREV = '⏮ Prev'
ICON_NEXT = 'Next ⏭'
ICON_SAVE = '💾 Validate & save'
