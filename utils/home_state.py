from datetime import date

HEADER_DATE_FORMAT = "%A, %d %b"


class HomeState:
    """Local state of the home dashboard: date picker overlay and details panel."""

    def __init__(self, selected_date: date | None = None) -> None:
        self.selected_date = selected_date or date.today()
        self.calendar_open = False
        self.details_open = False

    def toggle_calendar(self) -> None:
        self.calendar_open = not self.calendar_open

    def close_calendar(self) -> None:
        self.calendar_open = False

    def select_date(self, value: date) -> None:
        self.selected_date = value

    def toggle_details(self) -> None:
        self.details_open = not self.details_open

    def header_date(self) -> str:
        # e.g. "Friday, 06 Nov"
        return self.selected_date.strftime(HEADER_DATE_FORMAT)


def greeting(name: str) -> str:
    first = name.split()[0] if name and name.strip() else ""
    return f"Hello {first}!" if first else "Hello!"
