# animations.py - Tick scheduling, reveal rendering, gradients and gradient button

import tkinter as tk

from PIL import Image, ImageDraw, ImageTk

from config import THEME, TICK_INTERVALS_MS, FONTS, PROGRESS_BAR_SIZE, PANEL_SIZE, PANEL_GRADIENT
from sequencer import Phase


def lerp_color(hex1, hex2, t):
    """Linearly interpolate between two hex colors."""
    t = max(0.0, min(1.0, t))
    r1, g1, b1 = int(hex1[1:3], 16), int(hex1[3:5], 16), int(hex1[5:7], 16)
    r2, g2, b2 = int(hex2[1:3], 16), int(hex2[3:5], 16), int(hex2[5:7], 16)
    r = int(r1 + (r2 - r1) * t)
    g = int(g1 + (g2 - g1) * t)
    b = int(b1 + (b2 - b1) * t)
    return f"#{r:02x}{g:02x}{b:02x}"


def panel_color_at(y):
    """Panel gradient color at canvas row y."""
    height = PANEL_SIZE[1]
    return lerp_color(PANEL_GRADIENT[0], PANEL_GRADIENT[1], y / max(1, height - 1))


def result_color(opacity, highlighted=False, base=PANEL_GRADIENT[0]):
    """Color of the result text: tk has no per-item alpha, so fade from the panel color behind it."""
    if highlighted:
        return THEME["accent"]
    return lerp_color(base, THEME["primary"], opacity)


def interval_for(phase):
    """Timer period in ms for the given phase."""
    return TICK_INTERVALS_MS[phase.value]


def create_gradient_image(app, width, height, color1, color2, cache_key=None, diagonal=True):
    """Create a gradient image (diagonal: top-left=color1, bottom-right=color2; else top to bottom).

    Returns a PIL.ImageTk.PhotoImage. Stored in _gradient_cache to prevent GC.
    """
    if width < 1 or height < 1:
        return None
    img = Image.new("RGB", (width, height))
    draw = ImageDraw.Draw(img)
    if not diagonal:
        max_y = height - 1 if height > 1 else 1
        for y in range(height):
            draw.line([(0, y), (width - 1, y)], fill=lerp_color(color1, color2, y / max_y))
    else:
        # Anti-diagonal lines share the same blend factor
        max_d = width + height - 2 if (width + height - 2) > 0 else 1
        for d in range(width + height - 1):
            color = lerp_color(color1, color2, d / max_d)
            x0 = min(d, width - 1)
            y0 = d - x0
            x1 = max(d - (height - 1), 0)
            y1 = d - x1
            draw.line([(x0, y0), (x1, y1)], fill=color)
    photo = ImageTk.PhotoImage(img)
    key = cache_key or id(photo)
    app._gradient_cache[key] = photo
    return photo


# -- Reveal sequence -------------------------------------------------------

def start_reveal(app, on_commit):
    """Start the sequencer and the loading timer."""
    app.sequencer.start(on_commit)
    draw_progress(app, 0.0)
    schedule_tick(app)


def schedule_tick(app):
    """Arm the timer for the sequencer's active phase."""
    phase = app.sequencer.phase
    if phase is Phase.IDLE:
        app._tick_job = None
        return
    app._tick_job = app.root.after(interval_for(phase), lambda: reveal_tick(app, phase))


def stop_reveal(app):
    """Cancel the pending timer."""
    if app._tick_job:
        app.root.after_cancel(app._tick_job)
        app._tick_job = None


def reveal_tick(app, source):
    """Timer callback: advance the sequencer and draw the result."""
    app._tick_job = None
    result = app.sequencer.tick(source)
    render_tick(app, result)
    if result.finished:
        app._on_reveal_finished()
    else:
        schedule_tick(app)


def render_tick(app, result):
    """Apply one TickResult to the panel."""
    if result.pick is not None:
        app._show_pick(result.pick)
    if result.phase is Phase.LOADING:
        draw_progress(app, result.progress)
    elif result.phase is not Phase.IDLE or result.finished:
        try:
            app.panel.itemconfigure(app._result_item,
                                    fill=result_color(result.opacity, result.highlighted,
                                                        base=app._result_bg))
        except tk.TclError:
            pass


def draw_progress(app, fraction):
    """Fill the progress bar up to fraction (clamped to 0..1)."""
    bar_w, bar_h = PROGRESS_BAR_SIZE
    x0, y0 = app._bar_origin
    fill_w = int(bar_w * max(0.0, min(1.0, fraction)))
    app.panel.coords(app._bar_fill, x0, y0, x0 + fill_w, y0 + bar_h)


# -- Title -----------------------------------------------------------------

def draw_shadowed_text(canvas, x, y, text, font, color, offset=2):
    """Draw text centered on (x, y) with a soft drop shadow. Returns (shadow, text) item ids."""
    shadow = canvas.create_text(x + offset, y + offset, text=text, font=font,
                                fill=THEME["shadow"], anchor=tk.CENTER)
    main = canvas.create_text(x, y, text=text, font=font, fill=color, anchor=tk.CENTER)
    return shadow, main


# -- Gradient buttons ------------------------------------------------------

def create_gradient_button(app, parent, text, command, width, height, disabled=False):
    """Create a canvas-based button with diagonal gradient fill.

    Returns the canvas widget. Stores a '_btn_enabled' attribute for state management.
    """
    canvas = tk.Canvas(parent, width=width, height=height,
                       highlightthickness=0, bg=THEME["panel"], cursor="hand2")
    canvas._btn_text = text
    canvas._btn_command = command
    canvas._btn_w = width
    canvas._btn_h = height
    canvas._btn_enabled = not disabled

    draw_gradient_btn(app, canvas, hover=False)

    canvas.bind("<Enter>", lambda e, c=canvas: on_grad_btn_enter(app, c))
    canvas.bind("<Leave>", lambda e, c=canvas: on_grad_btn_leave(app, c))
    canvas.bind("<Button-1>", lambda e, c=canvas: on_grad_btn_click(app, c))

    return canvas


def draw_gradient_btn(app, canvas, hover=False):
    """Redraw a gradient button's background and text."""
    w = canvas._btn_w
    h = canvas._btn_h
    enabled = canvas._btn_enabled

    if not enabled:
        c1 = c2 = THEME["disabled"]
    elif hover:
        c1, c2 = THEME["primary_light"], THEME["primary"]
    else:
        c1, c2 = THEME["primary"], lerp_color(THEME["primary"], "#000000", 0.15)

    key = f"gbtn_{id(canvas)}_{hover}_{enabled}"
    photo = create_gradient_image(app, w, h, c1, c2, cache_key=key)
    canvas.delete("all")
    if photo:
        canvas.create_image(0, 0, anchor=tk.NW, image=photo)
    canvas.create_text(
        w // 2, h // 2, text=canvas._btn_text, fill=THEME["fg_highlight"],
        font=FONTS["body"], anchor=tk.CENTER
    )


def set_button_enabled(app, canvas, enabled):
    canvas._btn_enabled = enabled
    canvas.configure(cursor="hand2" if enabled else "arrow")
    draw_gradient_btn(app, canvas, hover=False)


def on_grad_btn_enter(app, canvas):
    if canvas._btn_enabled:
        draw_gradient_btn(app, canvas, hover=True)


def on_grad_btn_leave(app, canvas):
    draw_gradient_btn(app, canvas, hover=False)


def on_grad_btn_click(app, canvas):
    if canvas._btn_enabled and canvas._btn_command:
        canvas._btn_command()
