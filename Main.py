import tkinter as tk

from ConverterController import ConverterController
from CurrencyConverter import CurrencyConverter
from HistoryLog import HistoryLog
from RateTable import RateTable
from Settings import Settings
from UnitCatalog import UnitCatalog
from UnitConvertor import UnitConvertor


"""
Entry point for the unit converter.

Overview
--------
`Main` builds the catalog, rate table, engine, and history log once, hands
them to a `ConverterController`, and then shows either:

- A Tk form: category, from unit, to unit, value, Convert, converted value,
  history area, Clear History.
- An interactive console menu, when no display is available:
  1) Convert a value
  2) View history
  3) Clear history
  4) Exit

Both front ends only call the controller's handlers; neither performs
conversions or file access itself.
"""


def build_controller(settings):
    """
    Construct the shared tables and wire them into a controller.
    """
    catalog = UnitCatalog()
    convertor = UnitConvertor(catalog, CurrencyConverter(RateTable()))
    history_log = HistoryLog(settings.history_file)
    return ConverterController(catalog, convertor, history_log, settings)


class ConverterForm:
    """
    Tk widgets bound to a `ConverterController`.
    """

    def __init__(self, root, controller, settings):
        self.root = root
        self.controller = controller
        self.root.title(settings.window_title)
        self.root.geometry(settings.window_size)

        form = tk.Frame(root, padx=10, pady=5)
        form.pack(side=tk.TOP, fill=tk.X)

        self.category_var = tk.StringVar(value=controller.category)
        self.from_var = tk.StringVar()
        self.to_var = tk.StringVar()
        self.output_var = tk.StringVar()

        tk.Label(form, text="Select Category:").grid(row=0, column=0, sticky="w")
        tk.OptionMenu(form, self.category_var, *controller.catalog.categories(),
                      command=self.on_category_selected).grid(row=0, column=1, sticky="ew")

        tk.Label(form, text="From Unit:").grid(row=1, column=0, sticky="w")
        self.from_menu = tk.OptionMenu(form, self.from_var, "")
        self.from_menu.grid(row=1, column=1, sticky="ew")

        tk.Label(form, text="To Unit:").grid(row=2, column=0, sticky="w")
        self.to_menu = tk.OptionMenu(form, self.to_var, "")
        self.to_menu.grid(row=2, column=1, sticky="ew")

        tk.Label(form, text="Enter Value:").grid(row=3, column=0, sticky="w")
        self.input_entry = tk.Entry(form)
        self.input_entry.grid(row=3, column=1, sticky="ew")

        tk.Button(form, text="Convert", width=12, command=self.on_convert).grid(row=4, column=1, sticky="w")

        tk.Label(form, text="Converted Value:").grid(row=5, column=0, sticky="w")
        tk.Entry(form, textvariable=self.output_var, state="readonly").grid(row=5, column=1, sticky="ew")
        form.columnconfigure(1, weight=1)

        self.history_area = tk.Text(root, height=10, width=40, state=tk.DISABLED)
        self.history_area.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=10)

        tk.Button(root, text="Clear History", width=14, command=self.on_clear).pack(side=tk.BOTTOM, pady=5)

        self.fill_unit_menus(controller.units)
        self.refresh_history()

    def fill_unit_menus(self, units):
        for menu, var in ((self.from_menu, self.from_var), (self.to_menu, self.to_var)):
            options = menu["menu"]
            options.delete(0, "end")
            for unit in units:
                options.add_command(label=unit, command=lambda u=unit, v=var: v.set(u))
        self.from_var.set(self.controller.from_unit)
        self.to_var.set(self.controller.to_unit)

    def refresh_history(self):
        self.history_area.configure(state=tk.NORMAL)
        self.history_area.delete("1.0", tk.END)
        self.history_area.insert(tk.END, self.controller.history_text())
        self.history_area.configure(state=tk.DISABLED)

    def on_category_selected(self, category):
        self.fill_unit_menus(self.controller.select_category(category))

    def on_convert(self):
        outcome = self.controller.convert(self.input_entry.get(), self.from_var.get(), self.to_var.get())
        self.output_var.set(outcome.display)
        if outcome.ok:
            self.refresh_history()

    def on_clear(self):
        self.controller.clear_history()
        self.refresh_history()


class Main:
    """
    Interactive entry point that wires the controller to a front end.
    """
    def __init__(self, settings=None):
        """
        Build the controller and, if possible, a Tk root.

        Attributes
        ----------
        settings : Settings
        controller : ConverterController
        root : tk.Tk | None
            None in headless environments; the console menu is used instead.
        """
        self.settings = settings if settings is not None else Settings.from_env()
        self.controller = build_controller(self.settings)

        try:
            self.root = tk.Tk()
        except tk.TclError as e:
            print("GUI not available (no display). Using the console menu.")
            print(f"Details: {e}")
            self.root = None

    def run(self):
        if self.root is not None:
            ConverterForm(self.root, self.controller, self.settings)
            self.root.mainloop()
        else:
            self.run_console()

    def choose(self, prompt, options):
        """
        Ask the user to pick one of `options` by number.

        Returns
        -------
        str | None
            The chosen option, or None for an invalid choice.
        """
        for n, option in enumerate(options, start=1):
            print(f"{n}. {option}")
        choice = input(prompt).strip()
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1]
        print("Invalid choice.")
        return None

    def convert_from_console(self):
        category = self.choose("Select category: ", self.controller.catalog.categories())
        if category is None:
            return
        units = self.controller.select_category(category)
        from_unit = self.choose("From unit: ", units)
        to_unit = self.choose("To unit: ", units) if from_unit else None
        if to_unit is None:
            return
        outcome = self.controller.convert(input("Enter value: "), from_unit, to_unit)
        if outcome.ok:
            print(f"Converted Value: {outcome.display} {to_unit}")
        else:
            print(outcome.display)

    def run_console(self):
        """
        Present the console menu until the user exits.
        """
        while True:
            print("\nPlease choose an option:\n")
            print("1. Convert a value")
            print("2. View history")
            print("3. Clear history")
            print("4. Exit\n")

            choice = input("Enter your choice (1, 2, 3, or 4): ").strip()

            if choice == "1":
                self.convert_from_console()
            elif choice == "2":
                print(self.controller.history_text())
            elif choice == "3":
                if self.controller.clear_history():
                    print("History cleared.")
            elif choice == "4":
                print("Exiting the program.")
                return
            else:
                print("Invalid choice.")


if __name__ == "__main__":
    main = Main()
    print("Welcome!")
    main.run()
