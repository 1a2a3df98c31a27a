# dialogs.py - Message boxes

from tkinter import messagebox

from config import STRINGS


def show_exhausted_notice(parent):
    """Tell the user every student has already been drawn."""
    messagebox.showinfo(
        STRINGS["exhausted_title"],
        STRINGS["exhausted_message"],
        parent=parent,
    )
