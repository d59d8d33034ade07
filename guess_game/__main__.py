import sys

from guess_game.main import main

sys.exit(main())
