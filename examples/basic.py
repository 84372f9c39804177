"""Basic usage example: a dry run driven from Python."""

import logging

from webhook_solver import resolve_config, run


def main():
    logging.basicConfig(level=logging.INFO)

    config = resolve_config(properties={
        "user.name": "Ada Lovelace",
        "user.regno": "REG1002",
        "user.email": "ada@example.com",
        "final.query": "SELECT 42",
        "DRY_RUN": "true",
    })

    outcome = run(config)
    print(f"Exit code: {int(outcome.exit_code)} - {outcome.message}")


if __name__ == "__main__":
    main()
