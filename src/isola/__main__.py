from __future__ import annotations

from isola.main import main

if __name__ == "__main__":
    main()
