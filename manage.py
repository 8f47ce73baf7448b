"""
This is the main file to run the game.
It imports the main function from the formation_shooter app and runs it.
"""

from formation_shooter.app import main

if __name__ == "__main__":
    main()
