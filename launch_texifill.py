"""Point d'entrée de développement : ajoute src au sys.path puis lance l'éditeur."""
import sys
import os

_root = os.path.dirname(os.path.abspath(__file__))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from texifill.app.main import main

if __name__ == "__main__":
    sys.exit(main())
