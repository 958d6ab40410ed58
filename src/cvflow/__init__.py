"""Flowed layout and pagination engine for resumes and cover letters."""


def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from cvflow.cli import main as cli_main

    return cli_main()
