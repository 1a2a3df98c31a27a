# ui_builders.py - Widget construction and layout

import tkinter as tk

from config import THEME, PANEL_SIZE, PANEL_GRADIENT, PROGRESS_BAR_SIZE, BUTTON_SIZE, FONTS, STRINGS
import animations


def build_main_panel(app):
    """Centered panel canvas with a soft top-to-bottom gradient."""
    pw, ph = PANEL_SIZE
    app.panel = tk.Canvas(app.root, width=pw, height=ph, bg=THEME["panel"],
                          highlightthickness=0, bd=0)
    app.panel.place(relx=0.5, rely=0.5, anchor=tk.CENTER)
    photo = animations.create_gradient_image(
        app, pw, ph, PANEL_GRADIENT[0], PANEL_GRADIENT[1],
        cache_key="panel_grad", diagonal=False
    )
    if photo:
        app.panel.create_image(0, 0, anchor=tk.NW, image=photo, tags="bg")


def build_controls(app):
    """Title, instructions, button, progress bar, loading text, result and counter.

    Everything except the button is a canvas item so text sits directly on the gradient.
    """
    pw, ph = PANEL_SIZE
    cx = pw // 2
    canvas = app.panel

    # Title (shadow first so it sits below)
    y = 78
    app._title_items = animations.draw_shadowed_text(
        canvas, cx, y, STRINGS["title"], FONTS["title"], THEME["fg"]
    )

    # Instructions
    y += 82
    canvas.create_text(cx, y, text=STRINGS["instructions"], font=FONTS["body"],
                       fill=THEME["fg_secondary"], anchor=tk.CENTER)

    # Button
    bw, bh = BUTTON_SIZE
    y += 52
    app.pick_button = animations.create_gradient_button(
        app, canvas, STRINGS["button"], app.on_pick_clicked, bw, bh
    )
    canvas.create_window(cx, y, window=app.pick_button, anchor=tk.N)

    # Progress bar (track + fill)
    bar_w, bar_h = PROGRESS_BAR_SIZE
    y += bh + 40
    x0 = cx - bar_w // 2
    app._bar_origin = (x0, y)
    app._bar_track = canvas.create_rectangle(x0, y, x0 + bar_w, y + bar_h,
                                             fill=THEME["track"], width=0, state=tk.HIDDEN)
    app._bar_fill = canvas.create_rectangle(x0, y, x0, y + bar_h,
                                            fill=THEME["accent"], width=0, state=tk.HIDDEN)

    # Loading text
    y += bar_h + 35
    app._loading_item = canvas.create_text(cx, y, text=STRINGS["loading"], font=FONTS["loading"],
                                           fill=THEME["fg_secondary"], anchor=tk.CENTER,
                                           state=tk.HIDDEN)

    # Result
    y += 55
    app._result_item = canvas.create_text(cx, y, text="", font=FONTS["result"],
                                          fill=THEME["primary"], anchor=tk.N,
                                          justify=tk.CENTER, state=tk.HIDDEN)
    # Fade starts from the gradient behind the middle line of the result
    app._result_bg = animations.panel_color_at(y + 45)

    # Counter (bottom-right)
    app._counter_item = canvas.create_text(pw - 20, ph - 20, text="", font=FONTS["counter"],
                                           fill=THEME["fg_secondary"], anchor=tk.SE)


def show_loading(app, visible):
    """Toggle the progress bar and loading text."""
    state = tk.NORMAL if visible else tk.HIDDEN
    for item in (app._bar_track, app._bar_fill, app._loading_item):
        app.panel.itemconfigure(item, state=state)


def show_result(app, text=None, visible=True):
    if text is not None:
        app.panel.itemconfigure(app._result_item, text=text)
    app.panel.itemconfigure(app._result_item, state=tk.NORMAL if visible else tk.HIDDEN)


def update_counter(app):
    app.panel.itemconfigure(
        app._counter_item,
        text=STRINGS["counter"].format(used=app.selection.used_count, total=app.selection.total),
    )
