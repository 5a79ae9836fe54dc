import argparse
import logging
import tkinter as tk

from dogcenter.controller import DogController
from dogcenter.monitor import FeedingMonitor
from dogcenter.repository import Repo
from dogcenter.storage import DogStore, get_db_path
from dogcenter.ui import AppUI
from dogcenter.utils import UILogHandler, send_notification

logger = logging.getLogger("dogcenter")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Track dogs and remind you when it is time to feed them.")
    parser.add_argument("--db", default=None, help="path to the SQLite database (default: app data dir)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = DogStore(args.db or get_db_path())
    store.initialize()
    logger.info("using database %s", store.path)
    repo = Repo()

    root = tk.Tk()
    controller = DogController(store, repo)
    ui = AppUI(root, repo, controller)

    log_handler = UILogHandler(ui.append_log)
    logging.getLogger("dogcenter").addHandler(log_handler)

    def notify(text: str) -> None:
        if ui.notifications_enabled():
            send_notification(text)

    monitor = FeedingMonitor(repo, on_reminder=ui.show_reminder, notify=notify)

    def on_change() -> None:
        ui.refresh_ui()
        monitor.scan_now()

    controller.on_change = on_change
    controller.refresh()
    monitor.start()

    def on_close() -> None:
        # no join: the monitor may be waiting on root.after() from its own thread
        monitor.stop()
        logging.getLogger("dogcenter").removeHandler(log_handler)
        store.close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()


if __name__ == "__main__":
    main()
