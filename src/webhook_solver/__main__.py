"""Allow ``python -m webhook_solver``."""

from webhook_solver.cli import main

if __name__ == "__main__":
    main()
