# -*- coding: utf-8 -*-
"""
Display a 2048 session in a matplotlib window.
"""
import numpy as np
from matplotlib import pyplot as plt

from merge2048.envs.session import SessionState


class WindowBoard:
    """
    Window drawing the 2048 grid and the session status using Matplotlib.
    """

    # ##: Tile colors, anything larger than the table uses ``DEFAULT_COLOR``.
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }
    DEFAULT_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.title = title
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor("#BBADA0")
        self.fig.canvas.manager.set_window_title(title)
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        # ## ----> Add cell for grid.
        self.textes = []
        self.axes = [self.fig.add_subplot(size, size, index + 1) for index in range(size * size)]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    @staticmethod
    def status(state: SessionState) -> str:
        """
        Build the status line shown above the grid.

        Parameters
        ----------
        state: SessionState
            Session to describe

        Returns
        -------
        str
            Score, best score and the end-of-game banner if any
        """
        line = f"Score: {state.score}    Best: {state.best_score}"
        if state.show_win:
            line += "    You win! (c: continue)"
        elif state.game_over:
            line += "    Game over! (r: new game)"
        return line

    def show_state(self, state: SessionState):
        """
        Show a session or update the session being shown.

        Parameters
        ----------
        state: SessionState
            Session to show
        """
        # ## ----> Update the cells.
        values = np.reshape(state.grid, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            value = int(value)
            text.set_text(str(value) if value else "")
            _ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))
        self.fig.suptitle(self.status(state))

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
