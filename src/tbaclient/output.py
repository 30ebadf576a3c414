"""Rendering of API payloads and diagnostic lines for the ``tba`` command.

API payloads are JSON documents: a team is a dict, a match list is a list
of dicts, ``years_participated`` is a list of ints. :class:`OutputManager`
renders them one of three ways:

* ``json`` -- indented JSON, suitable for ``jq``.
* ``plain`` -- one line per record with tab-separated values; nested
  objects such as match ``alliances`` stay on the line as compact JSON.
* ``rich`` -- highlighted JSON, chosen by ``auto`` on an interactive
  terminal.

Payloads go to stdout (or the ``-o`` file). Everything else, including the
``Cache hit`` / ``Cache miss`` / ``HTTP 200`` lines the fetchers emit with
:func:`debug`, goes to stderr. Debug lines only appear with ``--verbose``,
so library users who never install a manager see nothing.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """How ``tba`` prints payloads; stored as ``output.format`` in config."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Output settings for one ``tba`` invocation.

    ``AUTO`` becomes ``RICH`` on a colour-capable terminal and ``PLAIN``
    when stdout is piped, so ``tba event teams 2016casd | cut -f1`` works
    without extra flags.

    Args:
        format: Payload rendering.
        no_color: Print diagnostics without Rich markup. Also forced by
            ``NO_COLOR`` and ``TERM=dumb``.
        quiet: Drop ``info``, ``success`` and ``suggest`` lines. Errors and
            warnings still print.
        verbose: Show the fetchers' cache and status lines.
        output_file: Write payloads to this path instead of stdout.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        output_file: Optional[str] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._output_file = output_file

        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def format(self) -> OutputFormat:
        return self._format

    # ------------------------------------------------------------------ #
    # Payloads
    # ------------------------------------------------------------------ #

    def format_response(self, data: Any) -> None:
        """Render one API payload.

        With ``output_file`` set the payload is always saved as JSON,
        whatever the format, so ``-o team.json`` produces a file that can be
        loaded back.

        Args:
            data: Decoded JSON, as returned by the :class:`~tbaclient.api.TBA`
                methods.
        """
        if self._output_file:
            self._write_to_file(data)
            return

        if self._format == OutputFormat.JSON:
            self.print_data(_dumps(data))
        elif self._format == OutputFormat.PLAIN:
            self._print_plain(data)
        else:
            self._print_rich(data)

    def print_data(self, text: str) -> None:
        """Emit one line of payload text, appending to ``output_file`` if set."""
        if self._output_file:
            with open(self._output_file, "a", encoding="utf-8") as f:
                f.write(text)
                if not text.endswith("\n"):
                    f.write("\n")
        else:
            print(text, file=sys.stdout, flush=True)

    # ------------------------------------------------------------------ #
    # Diagnostics
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        if not self._quiet:
            self._diag(message, message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diag(message, f"[green]{message}[/green]")

    def warning(self, message: str) -> None:
        self._diag(f"Warning: {message}", f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Report a failure, e.g. an API error before the process exits non-zero."""
        self._diag(f"Error: {message}", f"[bold red]Error:[/bold red] {message}")

    def suggest(self, message: str) -> None:
        """Point at the command that fixes the last error (``tba config identity ...``)."""
        if not self._quiet:
            self._diag(f"→ {message}", f"[dim]→ {message}[/dim]")

    def debug(self, message: str) -> None:
        """Trace a fetch. *message* may contain brackets and is printed literally."""
        if self._verbose:
            self._diag(f"[debug] {message}", f"[dim]\\[debug] {escape(message)}[/dim]")

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _diag(self, plain: str, markup: str) -> None:
        if self._no_color:
            print(plain, file=sys.stderr, flush=True)
        else:
            self._stderr.print(markup)

    def _print_plain(self, data: Any) -> None:
        # team / event / match dicts: one "field<TAB>value" line per field
        if isinstance(data, dict):
            for key, value in data.items():
                self.print_data(f"{key}\t{_plain_value(value)}")
        # lists of records (teams, matches) or rows (rankings): one line each
        elif isinstance(data, list):
            for item in data:
                if isinstance(item, dict):
                    self.print_data("\t".join(_plain_value(v) for v in item.values()))
                elif isinstance(item, list):
                    self.print_data("\t".join(_plain_value(v) for v in item))
                else:
                    self.print_data(str(item))
        elif data is None:
            self.print_data("")
        else:
            self.print_data(str(data))

    def _print_rich(self, data: Any) -> None:
        if isinstance(data, (dict, list)):
            syntax = Syntax(_dumps(data), "json", theme="monokai", word_wrap=True)
            self._stdout.print(syntax)
        else:
            self._stdout.print(str(data))

    def _write_to_file(self, data: Any) -> None:
        assert self._output_file is not None
        content = data if isinstance(data, str) else _dumps(data)
        with open(self._output_file, "w", encoding="utf-8") as f:
            f.write(content)
            if not content.endswith("\n"):
                f.write("\n")


# ------------------------------------------------------------------ #
# Module-level helpers
# ------------------------------------------------------------------ #


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _plain_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    if value is None:
        return ""
    return str(value)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """``NO_COLOR`` set to any value, or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Process-wide manager
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the manager installed by the ``tba`` callback.

    Library code calls this too: outside the CLI a default manager
    is created on first use, and since it is not verbose the fetchers'
    debug lines are discarded.
    """
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the installed manager; tests call this between CLI invocations."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def print_data(text: str) -> None:
    get_output().print_data(text)


def info(message: str) -> None:
    get_output().info(message)


def error(message: str) -> None:
    get_output().error(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)
