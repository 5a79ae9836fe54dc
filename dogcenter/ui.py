"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (reminder banner, input row, dog list, edit dialog, logs).
- Inputs: Repo (snapshot to paint), DogController (actions).
- Outputs: None (renders UI, sends actions to the controller).
- Side effects: Creates windows; shows error dialogs for invalid input.
- Thread-safety: UI code runs on main thread; the monitor calls schedule_refresh/show_reminder
                 and the log handler calls append_log, which all reschedule via Tk.after().
"""

import tkinter as tk
from tkinter import ttk, messagebox

from .repository import Repo
from .controller import DogController, DogNotFoundError
from .validation import ValidationError
from .config import APP_TITLE, LOG_MAX_LINES
from .utils import format_time_input


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles desktop notifications
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
        name_var / time_var (tk.StringVar): the add-dog input row
    - Public methods:
        schedule_refresh(): thread-safe way to repaint the dog list
        show_reminder(): thread-safe way to update the reminder banner
        append_log(): thread-safe way to add one line to the Logs panel
        notifications_enabled(): readable from any thread
    """

    def __init__(self, root: tk.Tk, repo: Repo, controller: DogController):
        self.root = root
        self.repo = repo
        self.controller = controller

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=True)
        self.show_logs = tk.BooleanVar(value=False)
        self.name_var = tk.StringVar()
        self.time_var = tk.StringVar()
        self._notify_enabled = True  # mirror of enable_notifications for the monitor thread

        # Window
        self.root.title(APP_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg="#ffffff")

        # Paned window: top = content, bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        content = tk.Frame(self.paned, bg="#ffffff")
        content.columnconfigure(0, weight=1)
        content.rowconfigure(4, weight=1)
        self.paned.add(content, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg="#ffffff")
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.paned.add(self.bottom_frame, weight=0)  # start collapsed; expand when Logs checked

        def _keep_sash_collapsed(_event=None):
            """When Logs is unchecked, keep sash at bottom so window can resize down."""
            if not self.show_logs.get():
                self.paned.update_idletasks()
                total = self.paned.winfo_height()
                if total > 0:
                    self.paned.sashpos(0, total)

        self.paned.bind("<Configure>", _keep_sash_collapsed)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure("Treeview", rowheight=28, font=("Segoe UI", 11))
        style.configure("Treeview.Heading", font=("Segoe UI", 10, "bold"))
        style.map("Treeview", background=[("selected", "#dfe7f2")], foreground=[("selected", "#2b2d42")])

        tk.Label(
            content, text="🐾 Dog Center 🐾", bg="#ffffff", fg="#2b2d42", font=("Segoe UI", 20, "bold")
        ).grid(row=0, column=0, pady=(16, 10))

        # Reminder banner (hidden while no dog is due)
        self.reminder_label = tk.Label(
            content,
            text="",
            bg="#ffefc1",
            fg="#b55d00",
            font=("Segoe UI", 12, "bold"),
            padx=12,
            pady=8,
        )
        self.reminder_label.grid(row=1, column=0, sticky="ew", padx=16, pady=(0, 8))
        self.reminder_label.grid_remove()

        # Input row
        input_row = tk.Frame(content, bg="#ffffff")
        input_row.grid(row=2, column=0, sticky="ew", padx=16, pady=(0, 8))
        input_row.columnconfigure(0, weight=2)
        input_row.columnconfigure(1, weight=1)

        self.name_entry = tk.Entry(input_row, textvariable=self.name_var)
        self.name_entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        self.time_entry = tk.Entry(input_row, textvariable=self.time_var, width=8)
        self.time_entry.grid(row=0, column=1, sticky="ew", padx=(0, 8))
        self._bind_time_formatting(self.time_var, self.time_entry)
        ttk.Button(input_row, text="Add", command=self.add_dog).grid(row=0, column=2)
        tk.Label(input_row, text="Dog name", bg="#ffffff", fg="gray", font=("Segoe UI", 8)).grid(row=1, column=0, sticky="w")
        tk.Label(input_row, text="Feeding Time (HH:mm)", bg="#ffffff", fg="gray", font=("Segoe UI", 8)).grid(row=1, column=1, sticky="w")
        self.name_entry.bind("<Return>", lambda _e: self.add_dog())
        self.time_entry.bind("<Return>", lambda _e: self.add_dog())

        tk.Label(
            content, text="🐶 Registered Dogs", bg="#ffffff", fg="#444444", font=("Segoe UI", 13, "bold")
        ).grid(row=3, column=0, sticky="w", padx=16, pady=(12, 4))

        # Treeview: iid = dog id
        self.columns = ("name", "feeding_time")
        self.tree = ttk.Treeview(content, columns=self.columns, show="headings", selectmode="browse")
        self.tree.heading("name", text="Name")
        self.tree.heading("feeding_time", text="Feeding Time")
        self.tree.column("feeding_time", width=120, anchor="center", stretch=False)
        self.tree.grid(row=4, column=0, sticky="nsew", padx=16, pady=(0, 5))
        self.tree.bind("<Double-1>", lambda _e: self.edit_dog())
        self.tree.bind("<Delete>", lambda _e: self.delete_dog())

        # Buttons & toggles
        button_frame = tk.Frame(content, bg="#ffffff")
        button_frame.grid(row=5, column=0, sticky="ew", padx=16, pady=(0, 10))

        ttk.Button(button_frame, text="Edit Dog", command=self.edit_dog).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete Dog", command=self.delete_dog).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            bg="#ffffff",
            activebackground="#ffffff",
            command=self._sync_notify_flag,
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            bg="#ffffff",
            activebackground="#ffffff",
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Initial paint
        self.refresh_ui()

    # ---------- Public API for monitor / logging ----------

    def schedule_refresh(self) -> None:
        """
        Purpose: Allow other threads to request a UI update safely.
        Side effects: Schedules refresh_ui on the main thread via Tk.after().
        Thread-safety: Safe to call from any thread.
        """
        self.root.after(0, self.refresh_ui)

    def show_reminder(self, text: str) -> None:
        """Thread-safe: banner shows text, or hides when text is empty."""
        self.root.after(0, lambda: self._paint_reminder(text))

    def append_log(self, line: str) -> None:
        """Thread-safe: append one line to the Logs panel."""
        self.root.after(0, lambda: self._append_log(line))

    def notifications_enabled(self) -> bool:
        return self._notify_enabled

    # ---------- UI callbacks & utilities ----------

    def _sync_notify_flag(self) -> None:
        self._notify_enabled = bool(self.enable_notifications.get())

    def toggle_logs(self) -> None:
        """Show/hide logs in bottom pane. Resize pane to show/hide."""
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, int(total * 0.75))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, total)

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the repository snapshot, keeping the selection.
        Side effects: Mutates Treeview items (UI only).
        Thread-safety: Must run on main thread (use schedule_refresh from other threads).
        """
        selected = self.tree.selection()
        self.tree.delete(*self.tree.get_children())
        for dog in self.repo.snapshot():
            self.tree.insert("", "end", iid=str(dog.id), values=(dog.name, dog.feeding_time))
        keep = [iid for iid in selected if self.tree.exists(iid)]
        if keep:
            self.tree.selection_set(keep)

    def _paint_reminder(self, text: str) -> None:
        if text:
            self.reminder_label.configure(text=text)
            self.reminder_label.grid()
        else:
            self.reminder_label.configure(text="")
            self.reminder_label.grid_remove()

    def _bind_time_formatting(self, var: tk.StringVar, entry: tk.Entry) -> None:
        """Apply format_time_input on every write to var ("08" becomes "08:", max 5 chars)."""
        state = {"prev": var.get(), "busy": False}

        def on_write(*_args):
            if state["busy"]:
                return
            value = var.get()
            formatted = format_time_input(value, state["prev"])
            state["prev"] = formatted
            if formatted != value:
                state["busy"] = True
                var.set(formatted)
                state["busy"] = False
                entry.icursor(tk.END)

        var.trace_add("write", on_write)

    def _selected_dog_id(self) -> int | None:
        selected = self.tree.selection()
        if not selected:
            return None
        return int(selected[0])

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")

    # ---------- CRUD actions ----------

    def add_dog(self) -> None:
        """
        Purpose: Add a dog from the input row; clear the inputs on success.
        Side effects: Writes through the controller; error dialog on invalid input.
        """
        try:
            self.controller.add_dog(self.name_var.get(), self.time_var.get())
        except ValidationError as err:
            messagebox.showerror(err.title, str(err), parent=self.root)
            return
        self.name_var.set("")
        self.time_var.set("")
        self.name_entry.focus_set()

    def delete_dog(self) -> None:
        """
        Purpose: Delete the selected dog (single-select).
        Side effects: Writes through the controller.
        """
        dog_id = self._selected_dog_id()
        if dog_id is None:
            messagebox.showinfo("Delete Dog", "Select a dog to delete.", parent=self.root)
            return
        self.controller.delete_dog(dog_id)

    def edit_dog(self) -> None:
        """
        Purpose: Open a dialog to edit the selected dog's name and feeding time.
        Side effects: Writes through the controller on save.
        """
        dog_id = self._selected_dog_id()
        if dog_id is None:
            messagebox.showinfo("Edit Dog", "Select a dog to edit.", parent=self.root)
            return
        dog = self.repo.get(dog_id)
        if dog is None:
            messagebox.showerror("Edit Dog", "Dog not found.", parent=self.root)
            return

        self.controller.start_editing(dog.id, dog.name, dog.feeding_time)

        win = tk.Toplevel(self.root)
        win.title(f"Edit {dog.name}")
        win.configure(bg="#ffffff")
        win.transient(self.root)

        tk.Label(win, text="Name", bg="#ffffff").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        v_name = tk.StringVar(value=self.controller.editing_name)
        e_name = tk.Entry(win, textvariable=v_name)
        e_name.grid(row=0, column=1, padx=5, pady=5)

        tk.Label(win, text="Feeding Time (HH:mm)", bg="#ffffff").grid(row=1, column=0, sticky="e", padx=5, pady=5)
        v_time = tk.StringVar(value=self.controller.editing_time)
        e_time = tk.Entry(win, textvariable=v_time, width=8)
        e_time.grid(row=1, column=1, sticky="w", padx=5, pady=5)
        self._bind_time_formatting(v_time, e_time)

        def save():
            try:
                self.controller.save_edit(dog.id, v_name.get(), v_time.get())
            except ValidationError as err:
                messagebox.showerror(err.title, str(err), parent=win)
                return
            except DogNotFoundError as err:
                messagebox.showerror("Edit Dog", str(err), parent=win)
            win.destroy()

        def cancel():
            self.controller.cancel_editing(dog.id)
            win.destroy()

        win.protocol("WM_DELETE_WINDOW", cancel)
        ttk.Button(win, text="💾 Save", command=save).grid(row=2, column=0, pady=10)
        ttk.Button(win, text="Cancel", command=cancel).grid(row=2, column=1, pady=10)
        e_name.focus_set()
        # modal: no second dialog and no delete while this one is open
        win.wait_visibility()
        win.grab_set()
