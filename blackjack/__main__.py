import sys

from blackjack.main import main

sys.exit(main())
