"""Entry point kept minimal by delegating to Engine.

The legacy color boundary is built once inside Engine (or passed in) and
handed to every drawing call site from there.
"""

from core.engine import Engine


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
