"""
Native file and folder pickers, used when the command line leaves a gap.
"""

import logging
from pathlib import Path

from nong_replacer.models.config import AUDIO_EXTENSIONS

log = logging.getLogger(__name__)


def _hidden_root():
    import tkinter as tk

    root = tk.Tk()
    root.withdraw()
    root.attributes("-topmost", True)
    return root


def pick_song_file() -> Path | None:
    """Asks for a single audio file. Returns None if the dialog is cancelled."""
    import tkinter as tk
    from tkinter import filedialog

    patterns = " ".join(f"*.{ext}" for ext in AUDIO_EXTENSIONS)
    try:
        root = _hidden_root()
    except tk.TclError as e:
        log.warning(f"Cannot open the file picker: {e}")
        return None
    try:
        selected = filedialog.askopenfilename(
            title="Select the replacement song",
            filetypes=[("Music Files", patterns)],
            parent=root,
        )
    finally:
        root.destroy()
    return Path(selected) if selected else None


def pick_songs_dir() -> Path | None:
    """Asks for the game's songs folder. Returns None if the dialog is cancelled."""
    import tkinter as tk
    from tkinter import filedialog

    try:
        root = _hidden_root()
    except tk.TclError as e:
        log.warning(f"Cannot open the folder picker: {e}")
        return None
    try:
        selected = filedialog.askdirectory(
            title="Select the Geometry Dash songs folder",
            initialdir=str(Path.home()),
            mustexist=True,
            parent=root,
        )
    finally:
        root.destroy()
    return Path(selected) if selected else None
