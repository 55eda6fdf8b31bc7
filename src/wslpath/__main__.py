"""Allow running as: python -m wslpath"""

from wslpath.cli import run

run()
