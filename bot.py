"""
Thin entrypoint: `python bot.py` runs the router with settings from the environment.
"""
from tgrouter.app import main


if __name__ == "__main__":
    main()
