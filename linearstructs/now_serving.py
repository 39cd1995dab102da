"""A minute-by-minute simulation of help requests in a lab."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, List, Sequence, TextIO

from linearstructs.deque import Deque

_INSTRUCTIONS = (
    "Every prompt is one minute.  The following input is accepted:\n"
    "\t<class> <name> <#minutes>    : a normal help request\n"
    "\t!! <class> <name> <#minutes> : an emergency help request\n"
    "\tnone                         : no new request this minute\n"
    "\tfinished                     : end simulation\n"
)


@dataclass
class Request:
    """A student's request for help with a class."""

    class_code: str
    name: str
    minutes: int
    is_priority: bool = False


def _parse_request(tokens: Sequence[str], is_priority: bool) -> Request:
    if len(tokens) < 3:
        raise ValueError("a request needs a class, a name and a number of minutes")
    class_code, name, minutes_text = tokens[:3]
    try:
        minutes = int(minutes_text)
    except ValueError:
        raise ValueError(f"invalid number of minutes: {minutes_text!r}") from None
    return Request(class_code, name, minutes, is_priority)


class NowServing:
    """The queue of requests and the clock of the simulation."""

    def __init__(self) -> None:
        self.requests: Deque[Request] = Deque()
        self.minute = 0
        self.finished = False

    def handle(self, line: str) -> List[str]:
        """Process one minute of input and return the lines it displays.

        An emergency is served right after the request being served now.
        Malformed requests raise ValueError and change nothing.
        """
        tokens = line.split()
        if not tokens:
            return []
        first = tokens[0]

        try:
            if first == "!!":
                request = _parse_request(tokens[1:], True)
                current = self.requests.front()
                self.requests.pop_front()
                self.requests.push_front(request)
                self.requests.push_front(current)
            elif first == "finished":
                self.finished = True
            elif first != "none":
                self.requests.push_back(_parse_request(tokens, False))
        except IndexError as error:
            return [f"\t{error}"]

        self.minute += 1
        return self._serve()

    def _serve(self) -> List[str]:
        if not self.requests:
            return []
        current = self.requests.front()
        shown = []
        if current.minutes > 0:
            label = "Emergency for" if current.is_priority else "Currently serving"
            shown.append(
                f"\t{label} {current.name} for class {current.class_code}."
                f" Time left: {current.minutes}"
            )
            current.minutes -= 1
        if current.minutes == 0:
            self.requests.pop_front()
        return shown


def run(lines: Iterable[str], out: TextIO) -> NowServing:
    """Run the simulation over the given input lines, writing to out."""
    out.write(_INSTRUCTIONS)
    simulation = NowServing()
    for line in lines:
        if not line.split():
            continue
        out.write(f"<{simulation.minute}> ")
        try:
            shown = simulation.handle(line)
        except ValueError as error:
            shown = [f"\tERROR: {error}"]
        for text in shown:
            out.write(text + "\n")
        if simulation.finished:
            break
    out.write("End of simulation\n")
    return simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the help-request simulation on standard input."""
    parser = argparse.ArgumentParser(
        description="Simulate serving help requests one minute at a time."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())