"""Allow running as: python -m ticklist"""

from .cli.main import main

main()
