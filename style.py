"""Visual and behaviour constants — edit here to tweak the app's appearance."""

# ── Window ────────────────────────────────────────────────────────────────────
WINDOW_TITLE = "brain 2.0"
WINDOW_SIZE = (900, 600)
WINDOW_BG = "white"
HEADING_COLOR = "#1f2937"
COLUMN_TITLES = {
    "brainDump": "thoughts",
    "todoToday": "today's to do",
}

# ── Column ────────────────────────────────────────────────────────────────────
COLUMN_BG = "#f9fafb"
COLUMN_TITLE_COLOR = "#6b7280"
INPUT_PLACEHOLDER = "Add something..."
EMPTY_PLACEHOLDER = "No tasks yet"
EMPTY_PLACEHOLDER_COLOR = "#d1d5db"
ADD_BUTTON_BG = "#111827"
ADD_BUTTON_HOVER_BG = "#1f2937"

# ── Item row ──────────────────────────────────────────────────────────────────
ITEM_BG = "rgba(255, 255, 255, 0.8)"
ITEM_BORDER = "#f3f4f6"
ITEM_TEXT_COLOR = "#4b5563"
ITEM_HANDLE_WIDTH = 24            # px wide grip / rank badge on the left of each row
ITEM_HANDLE_COLOR = "#e5e7eb"
ITEM_HANDLE_HOVER_COLOR = "#9ca3af"
ITEM_BADGE_BG = "#f3f4f6"
ITEM_BADGE_COLOR = "#6b7280"
DELETE_BUTTON_COLOR = "#d1d5db"
DELETE_BUTTON_HOVER_COLOR = "#9ca3af"
DRAGGING_OPACITY = 0.5            # row opacity while it is being dragged

# ── Drag auto-scroll ──────────────────────────────────────────────────────────
SCROLL_THRESHOLD = 50             # px from a list edge where scrolling starts
SCROLL_SPEED = 10                 # px scrolled per drag-move event
