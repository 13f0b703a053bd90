"""Program entry point (CLI dispatcher).

All command logic lives in `jinab.cli.commands`; main remains a thin wrapper.
"""
from __future__ import annotations
from jinab.cli.commands import cli

def main():  # pragma: no cover - thin wrapper
	cli(prog_name='jinab')

if __name__ == '__main__':  # pragma: no cover
	main()
