from datetime import datetime

# -----------------------------
# Debug helpers (enable with --debug or env NAVALBATTLE_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = "navalbattle_debug.log"
DEBUG_ENV_VAR = "NAVALBATTLE_DEBUG"


def env_debug_enabled(environ) -> bool:
    return environ.get(DEBUG_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def _debug_log_line(line: str) -> None:
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_log(line: str) -> None:
    """Append a line to the debug log when debugging is enabled."""
    if DEBUG_ENABLED:
        _debug_log_line(line)


def debug_event(
    parent,
    title: str,
    message: str,
    details: str = "",
    *,
    force_popup: bool = False,
    level: str = "info",
) -> None:
    """Log a debug event and optionally show a popup."""
    _debug_log_line(f"{level.upper()} | {title} | {message}")
    if details:
        for ln in details.splitlines():
            _debug_log_line(f"    {ln}")

    if not (DEBUG_ENABLED or force_popup):
        return

    # Qt is only needed for the popup; the generator logs without it.
    from PyQt5 import QtWidgets

    box = QtWidgets.QMessageBox(parent)
    box.setWindowTitle(title)
    box.setText(message)
    if details:
        box.setDetailedText(details)
    if level == "error":
        box.setIcon(QtWidgets.QMessageBox.Critical)
    elif level == "warning":
        box.setIcon(QtWidgets.QMessageBox.Warning)
    else:
        box.setIcon(QtWidgets.QMessageBox.Information)
    box.exec_()
