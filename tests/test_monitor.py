import threading
from datetime import datetime

from dogcenter.models import DogRecord
from dogcenter.monitor import FeedingMonitor


class Recorder:
    def __init__(self):
        self.reminders = []
        self.notified = []
        self.scanned = threading.Event()

    def on_reminder(self, text):
        self.reminders.append(text)
        self.scanned.set()

    def notify(self, text):
        self.notified.append(text)


def _monitor(repo, clock, rec, **kw):
    return FeedingMonitor(repo, on_reminder=rec.on_reminder, notify=rec.notify, clock=clock, **kw)


def test_scan_reports_due_dog(repo, clock):
    repo.replace_dogs([DogRecord(1, "Buddy", "08:00"), DogRecord(2, "Max", "13:00")])
    rec = Recorder()
    m = _monitor(repo, clock, rec)

    assert m.scan() == "Time to feed: Buddy"
    assert repo.reminder == "Time to feed: Buddy"
    assert rec.reminders == ["Time to feed: Buddy"]
    assert rec.notified == ["Time to feed: Buddy"]


def test_repeated_scans_in_same_minute(repo, clock):
    repo.replace_dogs([DogRecord(1, "Max", "13:00"), DogRecord(2, "Luna", "13:00")])
    clock.now = datetime(2025, 10, 20, 13, 0, 1)
    rec = Recorder()
    m = _monitor(repo, clock, rec)

    m.scan()
    clock.now = datetime(2025, 10, 20, 13, 0, 58)
    m.scan()

    # banner repeats on every tick, desktop notification only on the change
    assert rec.reminders == ["Time to feed: Max, Luna"] * 2
    assert rec.notified == ["Time to feed: Max, Luna"]


def test_reminder_clears_after_the_minute(repo, clock):
    repo.replace_dogs([DogRecord(1, "Buddy", "08:00")])
    rec = Recorder()
    m = _monitor(repo, clock, rec)

    m.scan()
    clock.now = datetime(2025, 10, 20, 8, 1, 0)
    assert m.scan() == ""
    assert repo.reminder == ""
    assert rec.reminders == ["Time to feed: Buddy", ""]
    assert rec.notified == ["Time to feed: Buddy"]


def test_scan_reads_latest_snapshot(repo, clock):
    rec = Recorder()
    m = _monitor(repo, clock, rec)
    assert m.scan() == ""
    repo.replace_dogs([DogRecord(7, "Rex", "08:00")])
    assert m.scan() == "Time to feed: Rex"


def test_notify_is_optional(repo, clock):
    repo.replace_dogs([DogRecord(1, "Buddy", "08:00")])
    rec = Recorder()
    m = FeedingMonitor(repo, on_reminder=rec.on_reminder, clock=clock)
    assert m.scan() == "Time to feed: Buddy"


def test_thread_scans_at_start_and_on_demand(repo, clock):
    rec = Recorder()
    m = _monitor(repo, clock, rec, interval=3600)
    m.start()
    try:
        assert rec.scanned.wait(5)
        assert rec.reminders == [""]

        rec.scanned.clear()
        repo.replace_dogs([DogRecord(1, "Buddy", "08:00")])
        m.scan_now()
        assert rec.scanned.wait(5)
        assert rec.reminders[-1] == "Time to feed: Buddy"
    finally:
        m.stop()
        m.join(5)
    assert not m.running


def test_thread_rescans_on_interval(repo, clock):
    rec = Recorder()
    m = _monitor(repo, clock, rec, interval=0.01)
    m.start()
    try:
        for _ in range(3):
            rec.scanned.clear()
            assert rec.scanned.wait(5)
    finally:
        m.stop()
        m.join(5)
    assert len(rec.reminders) >= 3


def test_failing_callback_does_not_kill_thread(repo, clock):
    calls = []
    done = threading.Event()

    def on_reminder(text):
        calls.append(text)
        if len(calls) == 1:
            raise RuntimeError("boom")
        done.set()

    m = FeedingMonitor(repo, on_reminder=on_reminder, clock=clock, interval=3600)
    m.start()
    try:
        m.scan_now()
        assert done.wait(5)
    finally:
        m.stop()
        m.join(5)
    assert len(calls) >= 2
