# window_mgmt - Fixed-size centered window, icon, close handling

import logging

from PIL import Image, ImageDraw, ImageFont, ImageTk

from config import THEME, WINDOW_SIZE, STRINGS

logger = logging.getLogger(__name__)


def setup_window(app):
    """Title, fixed size (also greys out maximize), centered on screen."""
    w, h = WINDOW_SIZE
    app.root.title(STRINGS["window_title"])
    app.root.configure(bg=THEME["bg"])
    app.root.resizable(False, False)
    center_window(app.root, w, h)


def center_window(root, width, height):
    """Place a width x height window in the middle of the screen."""
    screen_w = root.winfo_screenwidth()
    screen_h = root.winfo_screenheight()
    x = max(0, (screen_w - width) // 2)
    y = max(0, (screen_h - height) // 2)
    root.geometry(f"{width}x{height}+{x}+{y}")


def setup_icon(app):
    """Generate the window icon in memory: white S on an indigo square."""
    try:
        images = []
        for s in (64, 32, 16):
            img = Image.new("RGBA", (s, s), THEME["primary"])
            draw = ImageDraw.Draw(img)
            try:
                font = ImageFont.truetype("segoeui.ttf", int(s * 0.7))
            except Exception:
                font = ImageFont.load_default()
            bbox = draw.textbbox((0, 0), "S", font=font)
            tw, th = bbox[2] - bbox[0], bbox[3] - bbox[1]
            draw.text(((s - tw) // 2, (s - th) // 2 - bbox[1]), "S",
                      fill=THEME["fg_highlight"], font=font)
            images.append(ImageTk.PhotoImage(img))
        app._icon_images = images  # Prevent GC
        app.root.iconphoto(True, *images)
    except Exception:
        logger.debug("Window icon unavailable", exc_info=True)


def bind_close(app):
    """Route the window manager close button through the app."""
    app.root.protocol("WM_DELETE_WINDOW", app.on_close)
