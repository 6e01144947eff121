from __future__ import annotations

import main


def test_color_theme_applied_before_window_is_created(monkeypatch):
    calls = []

    class FakeApp:
        def __init__(self, settings):
            calls.append("window")

        def mainloop(self):
            calls.append("mainloop")

    monkeypatch.setattr(main.ctk, "set_default_color_theme", lambda theme: calls.append(("theme", theme)))
    monkeypatch.setattr(main, "LifeClockApp", FakeApp)
    main.main()
    assert calls == [("theme", "blue"), "window", "mainloop"]
