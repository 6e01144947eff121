from __future__ import annotations

from lifeclock.ui import start_from_entries, view_model


def fill(ctl, year, month, day):
    ctl.set_field("year", year)
    ctl.set_field("month", month)
    ctl.set_field("day", day)


def test_idle_shows_start_and_hides_error_and_readout(ctl):
    vm = view_model(ctl)
    assert vm.start_text == "Start Clock"
    assert vm.start_enabled is True
    assert vm.error_visible is False
    assert vm.readout_visible is False


def test_running_disables_start_until_first_tick(ctl, sched):
    fill(ctl, "1990", "7", "15")
    ctl.start()
    vm = view_model(ctl)
    assert vm.start_text == "Clock Running"
    assert vm.start_enabled is False
    assert vm.readout_visible is False


def test_readout_after_tick(ctl, sched):
    fill(ctl, "1990", "7", "15")
    ctl.start()
    sched.fire()
    vm = view_model(ctl)
    assert vm.readout_visible is True
    assert vm.date_row.startswith("33:")
    assert vm.time_row == "14:05:09:123"
    assert vm.totals[0] == "33"
    assert vm.error_visible is False


def test_incomplete_start_shows_error(ctl):
    ctl.set_field("year", "1990")
    ctl.start()
    vm = view_model(ctl)
    assert vm.error_visible is True
    assert vm.error_text == "Please enter a valid date"
    assert vm.start_enabled is True


def test_future_date_shows_error_and_reenables_start(ctl, sched):
    fill(ctl, "2030", "1", "1")
    ctl.start()
    sched.fire()
    vm = view_model(ctl)
    assert vm.error_text == "Birth date cannot be in the future"
    assert vm.start_text == "Start Clock"
    assert vm.start_enabled is True
    assert vm.readout_visible is False


def test_reset_returns_to_idle_view(ctl, sched):
    fill(ctl, "1990", "7", "15")
    ctl.start()
    sched.fire()
    ctl.reset()
    vm = view_model(ctl)
    assert vm.start_enabled is True
    assert vm.error_visible is False
    assert vm.readout_visible is False
    assert vm.totals == ("", "", "")


def test_start_reads_entries_never_synced_by_key_events(ctl, sched):
    # e.g. a mouse paste into the day field that no key event reported
    ctl.set_field("year", "1990")
    ctl.set_field("month", "7")
    start_from_entries(ctl, {"year": "1990", "month": "7", "day": "15"})
    assert ctl.error == ""
    assert ctl.running is True
    sched.fire()
    assert ctl.elapsed.years == 33


def test_start_from_empty_entries_reports_error(ctl):
    start_from_entries(ctl, {"year": "1990", "month": "", "day": "15"})
    assert ctl.running is False
    assert view_model(ctl).error_text == "Please enter a valid date"
