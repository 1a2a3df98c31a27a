# app.py - Tkinter GUI (orchestration + handlers)

import logging
import tkinter as tk

from config import ROSTER, LOADING_TICKS, FADE_STEP, BLINK_TICKS, STRINGS
from selection import SelectionState, Exhausted
from sequencer import AnimationSequencer

# Extracted modules
import ui_builders
import window_mgmt
import animations
from dialogs import show_exhausted_notice

logger = logging.getLogger(__name__)


class StudentPickerApp:
    def __init__(self, root: tk.Tk, roster=ROSTER, rng=None):
        self.root = root
        window_mgmt.setup_window(self)
        window_mgmt.setup_icon(self)

        # Core state
        self.selection = SelectionState(roster, rng=rng)
        self.sequencer = AnimationSequencer(
            loading_ticks=LOADING_TICKS, fade_step=FADE_STEP, blink_ticks=BLINK_TICKS
        )
        self._ticket = None

        # Animation state
        self._tick_job = None
        self._gradient_cache = {}  # Prevent GC of PhotoImages

        # Build UI (delegated to ui_builders)
        ui_builders.build_main_panel(self)
        ui_builders.build_controls(self)
        ui_builders.update_counter(self)
        window_mgmt.bind_close(self)

        logger.info("Ready with %d students", self.selection.total)

    # -- Handlers ----------------------------------------------------------

    def on_pick_clicked(self):
        """Start an extraction, or tell the user the roster is used up."""
        try:
            self._ticket = self.selection.request_pick()
        except Exhausted:
            logger.info("Extraction requested after all %d students were drawn", self.selection.total)
            show_exhausted_notice(self.root)
            return

        animations.set_button_enabled(self, self.pick_button, False)
        ui_builders.show_result(self, visible=False)
        ui_builders.show_loading(self, True)
        animations.start_reveal(self, self._commit_pick)

    def _commit_pick(self):
        """Sequencer commit callback: draw the student now that loading is done."""
        result = self.selection.commit_pick(self._ticket)
        self._ticket = None
        return result

    def _show_pick(self, pick):
        ui_builders.show_loading(self, False)
        ui_builders.show_result(
            self, STRINGS["result"].format(name=pick.name, number=pick.number)
        )
        ui_builders.update_counter(self)

    def _on_reveal_finished(self):
        animations.set_button_enabled(self, self.pick_button, True)

    def on_close(self):
        """Abort any running extraction without recording it, then quit."""
        animations.stop_reveal(self)
        self.sequencer.cancel()
        if self._ticket is not None:
            self.selection.release(self._ticket)
            self._ticket = None
            logger.info("Extraction cancelled on close")
        self.root.destroy()
