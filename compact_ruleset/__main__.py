"""Package entry point for ``python -m compact_ruleset``.

WHY: Build scripts run the compiler as ``python -m compact_ruleset``
without relying on the console script being on PATH.

HOW: Delegates to the CLI's main() function.
"""

from compact_ruleset.cli import main

if __name__ == "__main__":
    main()
