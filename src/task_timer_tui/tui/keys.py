"""Key names shared by the input driver and the key handlers.

Printable keys are passed through as the single character itself; every
other key is one of the lowercase names below.
"""

from __future__ import annotations

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ENTER = "enter"
ESC = "esc"
BACKSPACE = "backspace"
TAB = "tab"
BACKTAB = "backtab"

# Final byte of CSI sequences ("\x1b[" + final)
CSI_KEYS = {
    "A": UP,
    "B": DOWN,
    "C": RIGHT,
    "D": LEFT,
    "Z": BACKTAB,
}

CONTROL_KEYS = {
    "\r": ENTER,
    "\n": ENTER,
    "\t": TAB,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
}


def is_printable(key: str) -> bool:
    """Return True for a single printable character."""
    return len(key) == 1 and key.isprintable()
