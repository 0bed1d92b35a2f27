"""Greetings, spoken time and date displays."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime

_NAME_LIMIT = 19


def _check_hour(hour: int) -> None:
    if not 0 <= hour <= 23:
        raise ValueError("Invalid Hour!")


def greeting_for_hour(hour: int) -> str:
    """Return the greeting for an hour from 0 to 23."""
    _check_hour(hour)
    if 5 <= hour < 12:
        return "Good Morning"
    if 12 <= hour < 17:
        return "Good Afternoon"
    return "Good Evening"


def spoken_time(hour: int, minute: int) -> str:
    """Say the time in words on a twelve-hour clock."""
    _check_hour(hour)
    if not 0 <= minute <= 59:
        raise ValueError(f"invalid minute {minute}")
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    next_hour = hour % 12 + 1
    if minute == 0:
        return f"It is {hour} o'clock."
    if minute == 15:
        return f"It is quarter past {hour}."
    if minute == 30:
        return f"It is half past {hour}."
    if minute == 45:
        return f"It is quarter to {next_hour}."
    if minute < 30:
        return f"It is {minute} minutes past {hour}."
    return f"It is {60 - minute} minutes to {next_hour}."


def greet(name: str) -> str:
    """Return a hello for ``name``."""
    return f"Hello, {name}!"


def greet_by_hour(name: str, hour: int) -> str:
    """Greet ``name`` according to the hour; raise ValueError for a bad hour."""
    greeting = greeting_for_hour(hour)
    if greeting == "Good Afternoon":
        return f"Good Afternoon {name}!"
    return f"{greeting}, {name}!"


def date_report(moment: datetime) -> str:
    """List the date and time fields of ``moment`` one per line."""
    return "\n".join(
        [
            f"year:  {moment.year:4d}",
            f"month:   {moment.month:2d}",
            f"day:     {moment.day:2d}",
            f"hour:    {moment.hour:2d}",
            f"min:     {moment.minute:2d}",
            f"sec:     {moment.second:2d}",
        ]
    )


def clock_line(moment: datetime) -> str:
    """Format ``moment`` as ``MM/DD/YYYY HH:MM:SS`` with a space-padded hour."""
    return (
        f"{moment.month:02d}/{moment.day:02d}/{moment.year:4d} "
        f"{moment.hour:2d}:{moment.minute:02d}:{moment.second:02d}"
    )


def _read_word(prompt: str) -> str:
    words = input(prompt).split()
    return words[0][:_NAME_LIMIT] if words else ""


def _run_clock() -> None:
    import curses

    def loop(screen) -> None:
        curses.curs_set(0)
        previous = None
        while True:
            now = datetime.now().replace(microsecond=0)
            if now != previous:
                previous = now
                text = clock_line(now)
                screen.clear()
                height, width = screen.getmaxyx()
                screen.addstr(height // 2, max((width - len(text)) // 2, 0), text)
                screen.refresh()
            curses.napms(50)

    try:
        curses.wrapper(loop)
    except KeyboardInterrupt:
        pass


def main(argv=None) -> int:
    """Run one of the greeting or clock programs."""
    parser = argparse.ArgumentParser(prog="tinkerbox-greetings")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("auto", help="greet and say the current time")
    commands.add_parser("greet", help="ask a name and say hello")
    commands.add_parser("hour", help="ask a name and an hour and greet")
    commands.add_parser("date", help="print the current date fields")
    commands.add_parser("clock", help="show a full-screen clock")
    args = parser.parse_args(argv)

    if args.command == "auto":
        now = datetime.now()
        print(f"{greeting_for_hour(now.hour)}!")
        print(spoken_time(now.hour, now.minute))
    elif args.command == "greet":
        print(greet(_read_word("What is your name? ")))
    elif args.command == "hour":
        name = _read_word("What is your name? ")
        try:
            hour = int(input("What is the hour (0..23)? ").strip())
            print(greet_by_hour(name, hour))
        except ValueError:
            print("Invalid Hour!")
            return 1
    elif args.command == "date":
        print(date_report(datetime.now()))
    else:
        if not sys.stdout.isatty():
            print(clock_line(datetime.now()))
        else:
            _run_clock()
    return 0