# cli/cli_router.py

from datetime import date

from booking.dates import MONDAY, SUNDAY, shift_month
from booking.errors import BookingError
from booking.form import FORM_FIELDS, preview_customer_history, submit_booking
from booking.history import get_customer_history
from booking.periods import Period, bookings_for_period
from booking.search import search_bookings
from booking.stats import aggregate
from booking.summary import get_booking_details
from calendar_integration.ics_writer import export_bookings
from cli.views import render_booking_list, render_month, render_stats
from utils.structured_logger import log_event

MENU_OPTIONS = {
    "1": {"label": "New booking", "type": "new"},
    "2": {"label": "Calendar", "type": "calendar"},
    "3": {"label": "Upcoming", "type": "upcoming"},
    "4": {"label": "Search", "type": "search"},
    "5": {"label": "Last month", "type": "last"},
    "6": {"label": "This month", "type": "current"},
    "7": {"label": "Next month", "type": "next"},
    "8": {"label": "Summary", "type": "summary"},
    "9": {"label": "Booking details (copy text)", "type": "details"},
    "10": {"label": "Delete booking", "type": "delete"},
    "11": {"label": "Export calendar (.ics)", "type": "export"},
}

FIELD_PROMPTS = {
    "customer_name": "Customer name: ",
    "customer_phone": "Phone number (10 digits): ",
    "check_in": "Check-in date (YYYY-MM-DD or DD/MM/YYYY): ",
    "check_out": "Check-out date (YYYY-MM-DD or DD/MM/YYYY): ",
    "guest_count": "Number of guests: ",
    "booking_type": "Booking type (family/bachelors) [family]: ",
    "total_amount": "Total amount: ",
    "advance_amount": "Advance amount [0]: ",
}

FIELD_DEFAULTS = {"guest_count": "1", "booking_type": "family", "advance_amount": "0"}


def print_menu(io_adapter, options: dict, header: str = ""):
    lines = [f"\n🏡 {header}" if header else "", "Please select an action:"]
    for key, val in options.items():
        lines.append(f"{key}. {val['label']}")
    lines.append("0. Exit")
    io_adapter.prompt("\n".join(line for line in lines if line))


def header_line(config, repository, today: date) -> str:
    this_month = bookings_for_period(repository.bookings, Period.CURRENT, today)
    return (
        f"{config.property_name} | Total Bookings: {len(repository)} | "
        f"This Month: {len(this_month)}"
    )


def handle_new_booking(config, repository, io_adapter):
    raw = {}
    for field in FORM_FIELDS:
        answer = io_adapter.collect(FIELD_PROMPTS[field])
        raw[field] = answer or FIELD_DEFAULTS.get(field, "")
        if field == "customer_phone":
            history = preview_customer_history(raw[field], repository.bookings)
            if history.is_repeat:
                io_adapter.prompt(
                    f"⭐ Repeat guest: {history.total_bookings} previous bookings, "
                    f"{history.total_nights} total nights"
                )

    booking, errors = submit_booking(raw, repository)
    if errors:
        io_adapter.prompt("❌ Booking not saved:")
        for field in FORM_FIELDS:
            if field in errors:
                io_adapter.prompt(f"  - {field}: {errors[field]}")
        return None

    io_adapter.confirm(f"Booking created successfully! ID: {booking.id}")
    history = get_customer_history(booking.customer_phone, repository.bookings, exclude_id=booking.id)
    io_adapter.prompt(get_booking_details(booking, history, config.house_rules, config.currency_symbol))
    return booking


def handle_calendar(config, repository, io_adapter, today: date):
    first_weekday = MONDAY if config.calendar.week_start == "monday" else SUNDAY
    year, month = today.year, today.month
    while True:
        io_adapter.prompt(render_month(repository.bookings, month, year, today=today, first_weekday=first_weekday))
        step = io_adapter.collect("(p)revious / (n)ext month, Enter to go back: ").lower()
        if step.startswith("p"):
            year, month = shift_month(year, month, -1)
        elif step.startswith("n"):
            year, month = shift_month(year, month, 1)
        else:
            return


def handle_period(config, repository, io_adapter, period: Period, today: date):
    selected = bookings_for_period(repository.bookings, period, today)
    io_adapter.prompt(render_booking_list(period.label, selected, repository.bookings, config.currency_symbol))


def handle_search(config, repository, io_adapter):
    query = io_adapter.collect("Search by name, phone, booking ID or date: ")
    results = search_bookings(repository.bookings, query)
    log_event("cli", "search", input_data=query, output_data={"matches": len(results)})
    title = f"Results for '{query}'" if query.strip() else "All bookings"
    io_adapter.prompt(render_booking_list(title, results, repository.bookings, config.currency_symbol))


def handle_details(config, repository, io_adapter):
    booking_id = io_adapter.collect("Booking ID: ").upper()
    booking = repository.get(booking_id)
    if booking is None:
        io_adapter.prompt(f"No booking found with ID {booking_id}.")
        return
    history = get_customer_history(booking.customer_phone, repository.bookings, exclude_id=booking.id)
    io_adapter.prompt(get_booking_details(booking, history, config.house_rules, config.currency_symbol))


def handle_delete(config, repository, io_adapter):
    booking_id = io_adapter.collect("Booking ID to delete: ").upper()
    booking = repository.get(booking_id)
    if booking is None:
        io_adapter.prompt(f"No booking found with ID {booking_id}.")
        return
    answer = io_adapter.collect(f"Delete {booking.id} for {booking.customer_name}? (yes/no) ").lower()
    if answer.startswith("y"):
        repository.remove(booking.id)
        io_adapter.confirm(f"Booking {booking.id} deleted.")
    else:
        io_adapter.prompt("Nothing deleted.")


def handle_export(config, repository, io_adapter):
    path = export_bookings(repository.bookings, config.calendar.ics_path)
    io_adapter.confirm(f"Calendar exported to {path} ({len(repository)} bookings).")


def start_desk(config, repository, io_adapter, today: date | None = None):
    """
    Main menu loop. Unexpected errors inside an action are reported and the
    loop keeps running.
    """
    io_adapter.prompt(f"\n👋 Welcome to {config.property_name}!")
    log_event("cli", "session_start", output_data={"bookings": len(repository)})

    while True:
        current_day = today or date.today()
        print_menu(io_adapter, MENU_OPTIONS, header_line(config, repository, current_day))
        selection = io_adapter.collect("Select option: ")
        log_event("cli", "menu_selection", input_data=selection)

        if selection in ("0", "", "exit", "quit"):
            io_adapter.confirm("Goodbye!")
            log_event("cli", "exit", output_data="user exited")
            break

        action = MENU_OPTIONS.get(selection, {}).get("type")
        try:
            if action == "new":
                handle_new_booking(config, repository, io_adapter)
            elif action == "calendar":
                handle_calendar(config, repository, io_adapter, current_day)
            elif action in ("upcoming", "last", "current", "next"):
                handle_period(config, repository, io_adapter, Period(action), current_day)
            elif action == "search":
                handle_search(config, repository, io_adapter)
            elif action == "summary":
                io_adapter.prompt(render_stats(aggregate(repository.bookings), config.currency_symbol))
            elif action == "details":
                handle_details(config, repository, io_adapter)
            elif action == "delete":
                handle_delete(config, repository, io_adapter)
            elif action == "export":
                handle_export(config, repository, io_adapter)
            else:
                io_adapter.prompt("❌ Invalid choice. Please pick one of the listed options.")
                log_event("cli", "unsupported_action", input_data=selection)
        except BookingError as e:
            io_adapter.prompt(f"❌ {e}")
            log_event("cli", "action_failed", input_data=selection, outcome="error", extra={"error": str(e)})
        except Exception as e:
            # Unexpected error: report and keep the desk usable
            io_adapter.prompt("Sorry, something went wrong with that action.")
            log_event("cli", "action_crashed", input_data=selection, outcome="error", extra={"error": repr(e)})
