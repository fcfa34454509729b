"""postnl CLI entry point."""

import sys

import click

from ..core.streaming import relay


@click.command()
def cli():
    """Copy stdin to stdout, ending non-empty output with a newline.

    Bytes pass through unchanged. A single trailing newline is appended
    only when the input is non-empty and does not already end with one.

    Exits 1 if reading or writing fails, including when the downstream
    reader closes the pipe early (e.g. `postnl | head -c1`). A closed
    pipe is not reported on stderr.

    Examples:
        printf 'abc' | postnl        # abc\\n
        printf 'abc\\n' | postnl      # abc\\n (unchanged)
        postnl < /dev/null           # no output
    """
    stdout = sys.stdout.buffer
    try:
        relay(sys.stdin.buffer, stdout)
        stdout.flush()

    except BrokenPipeError:
        # Downstream reader went away; close stdout so the interpreter
        # does not report the failed flush again on exit
        try:
            stdout.close()
        except BrokenPipeError:
            pass
        sys.exit(1)

    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
