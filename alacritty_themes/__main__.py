"""Allow running with: python -m alacritty_themes"""

from .cli import main

if __name__ == "__main__":
    main()
