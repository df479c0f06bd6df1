"""Allow running as ``python -m siem_seeder``."""

from siem_seeder.cli import main

main()
