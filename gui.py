"""
GUI for PocketCalc
Tkinter-based keypad calculator with an expression line and a result line
"""
import tkinter as tk
import json
import config
import keypad
from calculator import Calculator


class PocketCalcGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # One calculator per window
        self.calculator = Calculator()

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", False)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)

    # ── Settings persistence ─────────────────────────────────────────────
    _SETTINGS_FILE = config.SETTINGS_PATH

    def _load_settings(self):
        try:
            with open(self._SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(self._SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def apply_theme(self):
        """Refresh T, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = not self.dark_mode
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["accent"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "mode":
            bg, fg, abg = T["mode_bg"], T["mode_fg"], T["shadow_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    def create_widgets(self):
        """Create main UI components"""
        T = self.T
        # Top bar
        self.top_frame = tk.Frame(self.root, bg=T["bg_dark"], height=40)
        self.top_frame.pack(fill=tk.X, padx=2, pady=2)

        tk.Label(
            self.top_frame, text=config.APP_NAME,
            font=(config.BUTTON_FONT[0], 14, "bold"),
            bg=T["bg_dark"], fg=T["accent"]
        ).pack(side=tk.LEFT, padx=8)

        self._neu_btn(
            self.top_frame, "☾" if not self.dark_mode else "☀",
            command=self._toggle_dark_mode, kind="mode",
            font=config.LABEL_FONT, width=3
        ).pack(side=tk.RIGHT, padx=4, pady=2)

        # Display area — neumorphic inset card with LCD-style font
        outer = tk.Frame(self.root, bg=T["shadow_dark"], bd=0)
        outer.pack(fill=tk.X, padx=6, pady=(4, 6))
        inner = tk.Frame(outer, bg=T["shadow_lite"], bd=0)
        inner.pack(fill=tk.BOTH, expand=True, padx=(1, 0), pady=(1, 0))
        self.display_frame = tk.Frame(inner, bg=T["display_bg"], height=130)
        self.display_frame.pack(fill=tk.BOTH, expand=True, padx=(0, 1), pady=(0, 1))
        self.display_frame.pack_propagate(False)

        self.display = tk.Label(
            self.display_frame, text="",
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["subtext"],
            anchor=tk.E, padx=12, pady=2
        )
        self.display.pack(side=tk.TOP, fill=tk.X)

        self.result_display = tk.Label(
            self.display_frame, text="",
            font=config.RESULT_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=12, pady=0
        )
        self.result_display.pack(side=tk.BOTTOM, fill=tk.X)

        # Keypad
        self.keypad_frame = tk.Frame(self.root, bg=T["bg"])
        self.keypad_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=3)
        self.create_keypad(self.keypad_frame)

        self.update_display()

    def create_keypad(self, parent):
        """Lay the buttons out on a 4-column grid"""
        for col in range(4):
            parent.grid_columnconfigure(col, weight=1, uniform="keys")

        for r, row in enumerate(keypad.BUTTON_ROWS):
            parent.grid_rowconfigure(r, weight=1)
            col = 0
            for label in row:
                kind, rowspan, colspan = keypad.button_layout(label)
                btn = self._neu_btn(parent, label, command=lambda b=label: self.calculator_button_click(b), kind=kind)
                btn.grid(row=r, column=col, rowspan=rowspan, columnspan=colspan,
                         sticky="nsew", padx=3, pady=3)
                col += colspan

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        self.calculator.press(keypad.parse_key(button))
        self.update_display()

    def on_key_press(self, event):
        """Handle keyboard input"""
        edit = keypad.from_key_event(event.char, event.keysym)
        if edit is None:
            return
        self.calculator.press(edit)
        self.update_display()

    def update_display(self):
        """Update the expression and result lines"""
        self.display.config(text=self.calculator.expression)
        result = self.calculator.result_text
        fg = self.T["danger"] if result == config.ERROR_TEXT else self.T["display_fg"]
        self.result_display.config(text=result, fg=fg)
