# config.py - Palette, roster and animation timings

# Material palette (light)
THEME = {
    # Backgrounds
    "bg": "#fafafa",               # Window background
    "panel": "#ffffff",            # Main panel
    "track": "#e0e0e0",            # Progress bar track

    # Text
    "fg": "#212121",               # Primary text
    "fg_secondary": "#757575",     # Muted text
    "fg_highlight": "#ffffff",     # Text on buttons
    "shadow": "#dadada",           # Title drop shadow

    # Accents
    "primary": "#3f51b5",          # Material indigo
    "primary_light": "#6f7dcb",    # Hover
    "accent": "#ff4081",           # Material pink
    "disabled": "#9fa8da",         # Button while extracting
}

# Panel gradient: primary blended over white at ~2% (top) and ~6% (bottom)
PANEL_GRADIENT = ("#fbfbfd", "#f2f3fa")

# Fixed roster. Identity is by index: the two "Giovanni" are distinct slots.
ROSTER = (
    "Mario", "Luigi", "Anna", "Giulia", "Marco", "Sofia", "Matteo", "Luca", "Sara", "Francesco",
    "Alessandro", "Chiara", "Giovanni", "Elena", "Martina", "Davide", "Giorgia", "Nicola", "Federica", "Simone",
    "Carla", "Giovanni", "Valentina", "Emanuele", "Vittoria", "Stefano", "Rosa", "Pietro", "Simona", "Cristina",
)

# Animation budgets
LOADING_TICKS = 40      # 2s total at 50ms
FADE_STEP = 0.1         # Opacity increment per fade tick
BLINK_TICKS = 6         # ~1.2s at 200ms

# Timer period per phase (ms)
TICK_INTERVALS_MS = {
    "loading": 50,
    "fading_in": 30,
    "blinking": 200,
}

# Window geometry
WINDOW_SIZE = (1000, 700)
PANEL_SIZE = (800, 600)
PROGRESS_BAR_SIZE = (400, 4)
BUTTON_SIZE = (250, 50)

# Fonts
FONTS = {
    "title": ("Segoe UI Light", 32),
    "body": ("Segoe UI", 14),
    "loading": ("Segoe UI", 16),
    "result": ("Segoe UI Light", 24),
    "counter": ("Segoe UI", 12),
}

# UI text
STRINGS = {
    "window_title": "Estrazione Studente",
    "title": "Estrazione Studente",
    "instructions": "Premi il pulsante per estrarre uno studente",
    "button": "Estrai Studente",
    "loading": "Estrazione in corso...",
    "result": "Studente estratto:\n{name}\n(N° {number})",
    "counter": "Studenti estratti: {used}/{total}",
    "exhausted_title": "Completato",
    "exhausted_message": "Tutti gli studenti sono stati interrogati!",
}

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
