"""Entry point for the Life Clock.

Running this file loads the packaged ``lifeclock/config.yaml``,
configures logging and opens the ``LifeClockApp`` window defined in
``lifeclock.ui``.
"""
import logging

import customtkinter as ctk

from lifeclock.config import load_config
from lifeclock.ui import LifeClockApp


def main() -> None:
    settings = load_config()
    logging.basicConfig(level=settings.logging.level)
    # Must precede the first CTk widget, which reads the theme on creation.
    ctk.set_default_color_theme(settings.app.color_theme)
    app = LifeClockApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
