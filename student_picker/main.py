#!/usr/bin/env python3
# main.py - Entry point for Student Picker

import sys
import os
import logging

# Add the package directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import tkinter as tk
from app import StudentPickerApp
from config import LOG_FORMAT


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main():
    """Main entry point."""
    setup_logging()
    root = tk.Tk()
    StudentPickerApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
