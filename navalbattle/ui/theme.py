class Theme:
    """Centralized colors used across the UI."""

    # Backgrounds
    BG_DARK = "#020617"  # slate-950
    BG_PANEL = "#0f172a"  # slate-900
    BG_BUTTON = "#1f2937"  # gray-800

    # Generic text
    TEXT_MAIN = "#e5e7eb"  # gray-200
    TEXT_LABEL = "#9ca3af"  # gray-400

    # Empty-cell border
    BORDER_EMPTY = "#1f2937"

    # Blocked cells
    BLOCKED_BG = "#1e3a8a"
    BLOCKED_TEXT = "#bfdbfe"
    BLOCKED_BORDER = "#2563eb"

    # Ship cells
    SHIP_BG = "#064e3b"
    SHIP_TEXT = "#a7f3d0"
    SHIP_BORDER = "#10b981"

    # Links / highlights
    LINK = "#38bdf8"
    HIGHLIGHT = "#0ea5e9"
